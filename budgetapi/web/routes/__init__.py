"""Price API route modules.

Each route module exports a `router` object (APIRouter instance) which
create_app() includes in the application.
"""

from budgetapi.web.routes import health, prices

__all__ = ["health", "prices"]
