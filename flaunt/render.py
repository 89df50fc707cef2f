from __future__ import annotations

from collections.abc import Mapping, Sequence

from flaunt.config import DEFAULT_PROBLEM_URL
from flaunt.schemas import Difficulty, Problem, Solving

_FOOTER = (
    "This file was generated automatically by "
    "[flaunt](https://github.com/vadimalekseev/flaunt)."
)

_HEADLINES = {
    Difficulty.HARD: 'Number of "Hard" solved problems 🤯',
    Difficulty.MEDIUM: 'Number of "Medium" solved problems 😨',
    Difficulty.EASY: 'Number of "Easy" solved problems 🥱',
}


def pascal_case(slug: str) -> str:
    return " ".join(part[:1].upper() + part[1:] for part in slug.split("-") if part)


def problem_url(slug: str, *, template: str = DEFAULT_PROBLEM_URL) -> str:
    return template.format(slug=slug)


def _cell(text: str) -> str:
    # a bare '|' would end the table cell
    return text.replace("|", "\\|")


def _render_solving(solving: Solving) -> str:
    out = f"[{_cell(solving.language)}]({_cell(solving.path)})"
    if solving.comment:
        out += f" ({_cell(solving.comment)})"
    return out


def _render_rows(problems: Sequence[Problem], *, url_template: str) -> str:
    rows: list[str] = []
    for idx, problem in enumerate(problems, start=1):
        solvings = ", ".join(_render_solving(s) for s in problem.solvings)
        rows.append(
            f"|{idx}"
            f"|[{pascal_case(problem.problem_id)}]"
            f"({problem_url(problem.problem_id, template=url_template)})"
            f"|{problem.difficulty.label}"
            f"|{solvings}|"
        )
    return "\n".join(rows)


def render_solvings_table(
    summary: str, problems: Sequence[Problem], *, url_template: str = DEFAULT_PROBLEM_URL
) -> str:
    body = _render_rows(problems, url_template=url_template)
    lines = [
        "<details>",
        f"<summary>{summary}</summary>",
        "",
        "| #     | Problem            | Difficulty | Solvings                |",
        "|:-----:|:------------------:|:----------:|:-----------------------:|",
    ]
    if body:
        lines.append(body)
    lines.append("</details>")
    return "\n".join(lines) + "\n"


def render_report(
    problems: Mapping[str, Problem], *, url_template: str = DEFAULT_PROBLEM_URL
) -> str:
    ordered = sorted(problems.values(), key=lambda p: p.problem_id)

    sections = [
        "# This repo contains my leetcode problem solving tasks",
        "",
        f"## Number of all solved problems 📈: {len(ordered)}",
        render_solvings_table("All solvings", ordered, url_template=url_template),
    ]
    for difficulty in Difficulty:
        group = [p for p in ordered if p.difficulty == difficulty]
        sections.append(f"## {_HEADLINES[difficulty]}: {len(group)}")
        sections.append(
            render_solvings_table(difficulty.label, group, url_template=url_template)
        )
    sections.append(_FOOTER)
    return "\n".join(sections) + "\n"
