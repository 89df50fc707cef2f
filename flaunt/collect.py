from __future__ import annotations

import logging
from pathlib import Path

from flaunt.config import FlauntConfig
from flaunt.declarations import read_header
from flaunt.languages import comment_prefix_for_extension, language_for_extension
from flaunt.schemas import Difficulty, Problem, Solving

logger = logging.getLogger(__name__)


def parse_solving(path: Path, content: str, *, root: Path, config: FlauntConfig) -> Solving:
    ext = path.suffix
    prefix = comment_prefix_for_extension(ext, overrides=config.comment_prefixes)
    header = read_header(
        content.splitlines(), prefix=prefix, policy=config.declaration_policy
    )
    decls = header.declarations

    language = decls.get("language") or language_for_extension(ext, overrides=config.languages)
    comment = decls.get("comment") or header.comment

    return Solving(
        language=language,
        path=path.relative_to(root).as_posix(),
        comment=comment,
        declarations=decls,
    )


def _solving_files(folder: Path) -> list[Path]:
    out: list[Path] = []
    for p in sorted(folder.iterdir()):
        if p.name.startswith("."):
            logger.debug("skipping hidden entry %s", p)
            continue
        if not p.is_file():
            logger.debug("skipping non-file %s", p)
            continue
        if not p.suffix:
            logger.debug("skipping %s: no extension", p)
            continue
        out.append(p)
    return out


def collect_problems(root: Path, *, config: FlauntConfig | None = None) -> dict[str, Problem]:
    config = config or FlauntConfig()
    problems: dict[str, Problem] = {}

    for difficulty in Difficulty:
        folder = root / difficulty.value
        if not folder.exists():
            logger.warning("folder %s does not exist", folder)
            continue
        if not folder.is_dir():
            logger.warning("can't read folder %s, it is a file", folder)
            continue

        for path in _solving_files(folder):
            content = path.read_text(encoding="utf-8-sig", errors="replace")
            solving = parse_solving(path, content, root=root, config=config)
            problem_id = path.stem

            existing = problems.get(problem_id)
            if existing is None:
                problems[problem_id] = Problem(
                    problem_id=problem_id, difficulty=difficulty, solvings=[solving]
                )
            else:
                if existing.difficulty != difficulty:
                    logger.warning(
                        "%s found under %s and %s; keeping %s",
                        problem_id,
                        existing.difficulty.value,
                        difficulty.value,
                        existing.difficulty.value,
                    )
                existing.solvings.append(solving)
            logger.debug("collected %s (%s)", solving.path, solving.language)

    return problems
