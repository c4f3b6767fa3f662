"""The resume builder web application.

Layout:
    - app.core: settings, password hashing, token issuance, the bearer-token
      dependency, and shared exceptions.
    - app.database: engine and per-request session management.
    - app.models: SQLAlchemy tables (User, Resume) and the pydantic models of
      the documents embedded in a resume.
    - app.api: FastAPI routers and the route logic behind them.
    - app.main: the application factory.

No disk, network, or database access occurs in this module directly.
"""
