from pathlib import Path

from bgeraser.removal.exceptions import RemovalError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt(path: Path | None = None) -> str:
    """Load the background removal instruction sent to the generative model.

    Args:
        path: Path to the prompt file.
              Defaults to the bundled remove_background.txt.

    Returns:
        The prompt text with surrounding whitespace stripped.

    Raises:
        RemovalError: if the file cannot be read or is empty.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "remove_background.txt"
    try:
        prompt = path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise RemovalError(f"Failed to load removal prompt: {exc}") from exc
    if not prompt:
        raise RemovalError(f"Removal prompt is empty: {path}")
    return prompt
