"""Tests for workspace linting and individual checks."""

from collections.abc import Callable
from pathlib import Path

from skillshelf.config import ShelfConfig
from skillshelf.lint import lint_workspace

VALID_SKILL = "---\nname: {slug}\ndescription: Useful guidance.\n---\n\n# Title\n\n```bash\necho ok\n```\n"


def _codes(root: Path, config: ShelfConfig | None = None) -> list[str]:
    return [issue.code for issue in lint_workspace(root, config).issues]


def test_clean_workspace_has_no_issues(write_skill: Callable[..., Path], tmp_path: Path) -> None:
    write_skill("good-skill", VALID_SKILL.format(slug="good-skill"))

    report = lint_workspace(tmp_path)

    assert report.documents_checked == 1
    assert report.issues == ()
    assert report.ok is True


def test_basic_fixture_without_frontmatter_is_clean(basic_workspace: Path) -> None:
    report = lint_workspace(basic_workspace)

    assert report.documents_checked == 2
    assert report.issues == ()


def test_require_frontmatter_flags_missing_block(basic_workspace: Path) -> None:
    report = lint_workspace(basic_workspace, ShelfConfig(require_frontmatter=True))

    assert [(issue.code, issue.slug, issue.line) for issue in report.issues] == [("FM001", "beta-guide", 1)]
    assert report.error_count == 1


def test_missing_name_and_description(write_skill: Callable[..., Path], tmp_path: Path) -> None:
    write_skill("meta", "---\nauthor: someone\n---\n# Meta\n")

    report = lint_workspace(tmp_path)

    assert [issue.code for issue in report.issues] == ["FM002", "FM003"]
    assert report.issues[0].message == "frontmatter is missing `name`"


def test_empty_and_non_string_fields(write_skill: Callable[..., Path], tmp_path: Path) -> None:
    write_skill("meta", "---\nname: '  '\ndescription: 42\n---\n# Meta\n")

    issues = lint_workspace(tmp_path).issues

    assert [(issue.code, issue.line) for issue in issues] == [("FM002", 2), ("FM003", 3)]
    assert issues[0].message == "frontmatter `name` is empty"
    assert issues[1].message == "frontmatter `description` must be a string, got int"


def test_name_differs_from_slug_is_warning(write_skill: Callable[..., Path], tmp_path: Path) -> None:
    write_skill("rails-tdd", VALID_SKILL.format(slug="rails-testing"))

    report = lint_workspace(tmp_path)

    assert [(issue.code, issue.severity) for issue in report.issues] == [("FM004", "warning")]
    assert report.ok is True
    assert _codes(tmp_path, ShelfConfig(name_must_match_slug=False)) == []


def test_code_fence_without_language(write_skill: Callable[..., Path], tmp_path: Path) -> None:
    write_skill("plain", "# Plain\n\n```\nno tag\n```\n\n~~~ruby\nputs 1\n~~~\n")

    issues = lint_workspace(tmp_path).issues

    assert [(issue.code, issue.line) for issue in issues] == [("CODE001", 3)]


def test_allowed_languages_restriction(write_skill: Callable[..., Path], tmp_path: Path) -> None:
    write_skill("langs", "# Langs\n\n```Ruby\nputs 1\n```\n\n```python\nprint(1)\n```\n")

    issues = lint_workspace(tmp_path, ShelfConfig(allowed_languages=("ruby", "dart"))).issues

    assert [(issue.code, issue.severity, issue.line) for issue in issues] == [("CODE002", "warning", 7)]


def test_unterminated_fence_is_malformed_markdown(write_skill: Callable[..., Path], tmp_path: Path) -> None:
    write_skill("open-fence", "# Open\n\n```dart\nvoid main() {}\n")

    issues = lint_workspace(tmp_path).issues

    assert [(issue.code, issue.line) for issue in issues] == [("DOC003", 3)]
    assert issues[0].hint == "add a closing ``` line"


def test_invalid_frontmatter_stops_further_checks(write_skill: Callable[..., Path], tmp_path: Path) -> None:
    write_skill("bad-yaml", "---\nname: [oops\n---\n```\nx\n```\n")

    issues = lint_workspace(tmp_path).issues

    assert [issue.code for issue in issues] == ["DOC002"]


def test_unreadable_document(tmp_path: Path) -> None:
    path = tmp_path / "skills" / "binary" / "SKILL.md"
    path.parent.mkdir(parents=True)
    path.write_bytes(b"\xff\xfe\x00garbage")

    issues = lint_workspace(tmp_path).issues

    assert [issue.code for issue in issues] == ["DOC001"]


def test_empty_body_warning(write_skill: Callable[..., Path], tmp_path: Path) -> None:
    write_skill("empty", "---\nname: empty\ndescription: nothing here\n---\n\n")

    assert _codes(tmp_path) == ["DOC004"]


def test_slug_collision_reported_for_each_file(tmp_path: Path) -> None:
    for folder in ("skills/shared", "more/shared"):
        path = tmp_path / folder / "SKILL.md"
        path.parent.mkdir(parents=True)
        path.write_text(VALID_SKILL.format(slug="shared"), encoding="utf-8")

    config = ShelfConfig(skill_globs=("skills/*/SKILL.md", "more/*/SKILL.md"))
    issues = [issue for issue in lint_workspace(tmp_path, config).issues if issue.code == "SLUG001"]

    assert [issue.path for issue in issues] == ["more/shared/SKILL.md", "skills/shared/SKILL.md"]
    assert issues[0].message == "slug `shared` is also used by skills/shared/SKILL.md"


def test_folder_not_in_slug_form(write_skill: Callable[..., Path], tmp_path: Path) -> None:
    write_skill("Ruby Testing", VALID_SKILL.format(slug="ruby-testing"))

    issues = lint_workspace(tmp_path).issues

    assert [(issue.code, issue.hint) for issue in issues] == [("SLUG002", "rename the folder to `ruby-testing`")]


def test_disabled_checks_are_skipped(write_skill: Callable[..., Path], tmp_path: Path) -> None:
    write_skill("plain", "---\nname: plain\n---\n# Plain\n\n```\nx\n```\n")

    assert _codes(tmp_path) == ["FM003", "CODE001"]
    assert _codes(tmp_path, ShelfConfig(disabled_checks=("CODE001",))) == ["FM003"]


def test_issues_sorted_by_path_then_line(write_skill: Callable[..., Path], tmp_path: Path) -> None:
    write_skill("b-doc", "# B\n\n```\nx\n```\n")
    write_skill("a-doc", "# A\n\n```\nx\n```\n\n```\ny\n```\n")

    issues = lint_workspace(tmp_path).issues

    assert [(issue.slug, issue.line) for issue in issues] == [("a-doc", 3), ("a-doc", 7), ("b-doc", 3)]


def test_report_counts(write_skill: Callable[..., Path], tmp_path: Path) -> None:
    write_skill("mixed", "---\nname: other\ndescription: d\n---\n# Mixed\n\n```\nx\n```\n")

    report = lint_workspace(tmp_path)

    assert report.error_count == 1
    assert report.warning_count == 1
    assert report.counts_by_code == {"CODE001": 1, "FM004": 1}
    assert report.ok is False
