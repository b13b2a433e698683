from app.schemas.schemas import *  # noqa: F401,F403
