from bgeraser.config.settings import Settings
from bgeraser.removal.base import BaseBackgroundRemover
from bgeraser.removal.example_adapter import ExampleRemover
from bgeraser.removal.openai_image_adapter import OpenAIImageRemover
from bgeraser.removal.prompt_loader import load_prompt
from bgeraser.removal.remote_service_adapter import RemoteServiceRemover


class RemoverFactory:
    """Creates the configured background removal strategy."""

    STRATEGIES: tuple[str, ...] = ("remote_service", "generative_model", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseBackgroundRemover:
        """Create a removal strategy from application settings."""
        strategy = settings.removal_strategy.lower().replace("-", "_")
        if strategy == "example":
            return ExampleRemover()
        if strategy == "remote_service":
            endpoint = settings.removal_endpoint.strip()
            if not endpoint:
                raise ValueError(
                    "removal_endpoint is required for removal_strategy=remote_service"
                )
            return RemoteServiceRemover(
                endpoint=endpoint,
                timeout_seconds=settings.removal_timeout_seconds,
                api_key=settings.removal_api_key,
            )
        if strategy == "generative_model":
            return OpenAIImageRemover(
                api_key=settings.openai_api_key,
                model=settings.openai_model_name,
                prompt=load_prompt(settings.removal_prompt_path),
                timeout_seconds=settings.openai_timeout_seconds,
                base_url=settings.openai_base_url or None,
            )
        raise ValueError(
            f"Unknown removal strategy '{strategy}'. Choose from: {list(cls.STRATEGIES)}"
        )
