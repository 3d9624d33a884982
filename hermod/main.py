import logging

from hermod.api.models import list_models
from hermod.config import load_config
from hermod.schemas.errors import HermodError

logger = logging.getLogger("hermod")


def _log_level(name: str) -> int:
    level = getattr(logging, name.upper(), None)
    if not isinstance(level, int):
        return logging.WARNING
    return level


def main() -> None:
    try:
        config = load_config()
    except ValueError as exc:
        print(f"Error: invalid configuration: {exc}")
        return

    logging.basicConfig(
        level=_log_level(config.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not config.api_key:
        print("OPENAI_API_KEY environment variable is not set.")
        return

    try:
        models = list_models(config.api_key, api_base=config.api_base, timeout=config.timeout)
    except HermodError as exc:
        logger.debug("Model listing failed (%s)", exc.code, exc_info=True)
        print(f"Error: {exc.message}")
        return

    for model in models:
        print(model.describe())


if __name__ == "__main__":
    main()
