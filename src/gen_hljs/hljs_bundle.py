import os
import shutil
import logging
import dataclasses
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)

DEFAULT_INPUTS = [
    "highlight.min.js",  # https://highlightjs.org/download with bash, c, cpp, ini, plaintext, rust, Makefile, arm
    "riscvasm.min.js",  # https://github.com/highlightjs/highlightjs-riscvasm
    "ldscript.min.js",  # local
]
DEFAULT_OUTPUT = os.path.join("..", "highlight.js")


@dataclasses.dataclass
class BundleManifest:
    """Ordered inputs to concatenate and where the result goes"""
    inputs: List[str]
    output: str
    base_dir: Optional[str] = None

    @classmethod
    def default(cls) -> 'BundleManifest':
        return cls(inputs=list(DEFAULT_INPUTS), output=DEFAULT_OUTPUT)

    def resolve(self, path: str) -> str:
        return _resolve(path, self.base_dir)


def _resolve(path: str, base_dir: Optional[str]) -> str:
    if base_dir is None or os.path.isabs(path):
        return path
    return os.path.join(base_dir, path)


class Bundler:
    """Concatenates manifest entries into a single file"""

    @staticmethod
    def bundle(manifest: Sequence[str], output_path: str, base_dir: Optional[str] = None) -> None:
        """
        Truncates output_path, then appends each manifest entry's bytes in order.

        Any OSError propagates and stops the run. Whatever was written
        before the failure is left in place.
        """
        out_fp = _resolve(output_path, base_dir)
        with open(out_fp, "wb") as out:
            logger.debug("Writing bundle to %s", out_fp)
            for entry in manifest:
                src_fp = _resolve(entry, base_dir)
                with open(src_fp, "rb") as src:
                    shutil.copyfileobj(src, out)
                logger.debug("Appended %s (%d bytes total)", src_fp, out.tell())
        logger.debug("Bundled %d files into %s", len(manifest), out_fp)

    @staticmethod
    def run(manifest: BundleManifest) -> None:
        Bundler.bundle(manifest.inputs, manifest.output, manifest.base_dir)
