"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "model-schemas.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for model-schema-factory.
# Replace every <REQUIRED> placeholder before running derive.
# Remove or fill <OPTIONAL> entries only when your setup needs them.

# Model classes to derive, as importable "package.module:ClassName" paths.
models:
  - "<REQUIRED>"

# Operation parameters to rewrite into schema-bearing parameters.
# in: body | query | path | header | cookie
# type: "package.module:ClassName" or one of string, integer, number, boolean, array
# parameters:
#   - name: "<OPTIONAL>"
#     in: body
#     type: "<OPTIONAL>"
#     is_array: false
#     required: true

output:
  # json or yaml
  format: json
  # last_wins, first_wins or error (error reports differing same-named schemas)
  duplicate_policy: last_wins
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
