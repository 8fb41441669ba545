from __future__ import annotations

import logging
from pathlib import Path

from scheme.compiler.code_generator import CodeGenerator

logger = logging.getLogger(__name__)


def compile_source(source: str) -> str:
    """Compile source text to AT&T assembly text."""
    codegen = CodeGenerator(source)
    codegen.start()
    return codegen.build()


def run_compiler_pipeline(source_path: str | Path, output_path: str | Path) -> None:
    source = Path(source_path).read_text(encoding="utf-8")
    assembly = compile_source(source)
    Path(output_path).write_text(assembly, encoding="utf-8")
    logger.info("wrote %s", output_path)
