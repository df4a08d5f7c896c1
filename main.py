import logging
import os
from datetime import datetime
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI

from src.endpoints.translation import router as translation_router
from src.services.completion_client import CompletionClient
from src.services.translation_gateway import TranslationGateway
from src.translation_config import TranslationConfig

logger = logging.getLogger(__name__)


def setup_logging():
    """Set up basic logging configuration."""
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def create_app(
    config: Optional[TranslationConfig] = None,
    completion_client: Optional[CompletionClient] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        config: Translation configuration; read from the environment when omitted
        completion_client: Completion client override, used by tests

    Returns:
        Configured FastAPI app with the translation gateway on app.state
    """
    if config is None:
        config = TranslationConfig.from_env()

    app = FastAPI(
        title="Document Translation API",
        description="Translates document summaries and key insights through a language model",
        version="1.0.0"
    )
    app.state.translation_gateway = TranslationGateway(config, client=completion_client)

    is_valid, error_message = config.validate()
    if not is_valid:
        logger.warning(f"Translation service is not ready: {error_message}")

    @app.on_event("shutdown")
    async def shutdown_event():
        await app.state.translation_gateway.aclose()

    # The translate route writes its own CORS headers, preflight included
    app.include_router(translation_router)

    @app.get("/")
    async def root():
        return {"message": "Document Translation API is running!"}

    @app.get("/health")
    async def health_check():
        gateway_config = app.state.translation_gateway.config
        return {
            "status": "healthy",
            "timestamp": datetime.now().isoformat(),
            "environment": {
                "port": os.getenv("PORT", "8000"),
                "openrouter_api_key_set": gateway_config.is_configured,
                "openrouter_model": gateway_config.model_id,
            },
            "services": {
                "translation_available": gateway_config.is_configured,
            }
        }

    return app


# Load environment variables
load_dotenv()
setup_logging()

app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.getenv("PORT", 8000)))
