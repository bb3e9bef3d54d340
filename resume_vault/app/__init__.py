"""Entry package for the resume vault application.

The application persists resumes together with their personal information,
work experience, education, skills, languages and additional skills as one
atomic aggregate.

Notes:
    1. app.core.config holds the settings.
    2. app.database.database manages the engine and session factory.
    3. app.models holds the SQLAlchemy models and the pydantic drafts.
    4. app.api.routes.route_logic holds the aggregate creation logic.

"""
