"""AWS Lambda entry point.

Mangum translates API Gateway proxy events into ASGI requests for the FastAPI app.
"""

from mangum import Mangum

from users_api.core.config import settings
from users_api.main import app

handler = Mangum(app, lifespan="off", api_gateway_base_path=settings.API_GATEWAY_BASE_PATH)
