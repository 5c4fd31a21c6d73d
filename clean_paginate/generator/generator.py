import logging
from pathlib import Path
from typing import NamedTuple

from .schema import ModelInfo
from .templates import render_client_module
from .templates import render_type_stubs

__all__ = ["GeneratorManifest", "MANIFEST", "generate"]


logger = logging.getLogger(__name__)


class GeneratorManifest(NamedTuple):
    pretty_name: str
    default_output: str


MANIFEST = GeneratorManifest(
    pretty_name="Clean Paginate", default_output="generated/paginate_client"
)


def generate(models: list[ModelInfo], output_dir: Path | str) -> list[Path]:
    """Write a client module and its type stubs into output_dir.

    Returns the paths of the written files.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    result = []
    for name, contents in [
        ("__init__.pyi", render_type_stubs(models)),
        ("__init__.py", render_client_module(models)),
    ]:
        path = output_dir / name
        path.write_text(contents)
        logger.info("Wrote %s (%d models)", path, len(models))
        result.append(path)
    return result
