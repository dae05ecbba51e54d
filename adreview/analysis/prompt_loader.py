from pathlib import Path

from adreview.analysis.exceptions import AnalysisError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

SYSTEM_PROMPT_NAME = "system_prompt.txt"


def load_prompt_template(name: str, prompt_dir: Path | None = None) -> str:
    """Load a stage prompt template.

    Args:
        name: File name of the template, e.g. ``qc_check_prompt.txt``.
        prompt_dir: Directory holding the templates.
                    Defaults to the bundled ``prompts`` directory.

    Returns:
        The raw template string with ``str.format`` placeholders.

    Raises:
        AnalysisError: if the file cannot be read.
    """
    path = (prompt_dir or _DEFAULT_PROMPT_DIR) / name
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisError(f"Failed to load prompt template '{name}': {exc}") from exc
