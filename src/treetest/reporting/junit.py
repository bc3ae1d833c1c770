from __future__ import annotations

from pathlib import Path

from junitparser import TestCase, TestSuite, JUnitXml, Failure

from treetest.result import TestResult

PATH_SEPARATOR = " / "


def _suite_names(result: TestResult) -> list[tuple[str, TestResult]]:
    """Pre-order list of (subject path, node) pairs."""
    out: list[tuple[str, TestResult]] = []

    def _visit(node: TestResult, prefix: str) -> None:
        name = f"{prefix}{PATH_SEPARATOR}{node.subject}" if prefix else node.subject
        out.append((name, node))
        for child in node.children:
            _visit(child, name)

    _visit(result, "")
    return out


def write_junit(result: TestResult, junit_path: Path) -> Path:
    """Write junit.xml for a result tree, return path.

    Each test with at least one assertion becomes a suite named by the path of
    subjects leading to it; each assertion becomes a test case.
    """
    xml = JUnitXml(result.subject)

    for suite_name, node in _suite_names(result):
        if not node.assertions:
            continue

        suite = TestSuite(suite_name)
        suite.add_property("passed", str(node.check()).lower())

        for assertion in node.assertions:
            case = TestCase(assertion.subject)
            case.classname = suite_name
            if not assertion.result:
                case.result = Failure(assertion.detail(), assertion.comparison)
            suite.add_testcase(case)

        # Use append (not +=) to preserve properties
        xml.append(suite)

    xml.update_statistics()

    junit_path.parent.mkdir(parents=True, exist_ok=True)
    xml.write(str(junit_path), pretty=True)
    return junit_path


def generate_report(junit_path: Path, report_path: Path | None = None) -> Path:
    """Render junit.xml → report.html using Jinja2 template, return path."""
    from jinja2 import Environment, FileSystemLoader

    if report_path is None:
        report_path = junit_path.with_name("report.html")

    xml = JUnitXml.fromfile(str(junit_path))

    suites = []
    for suite in xml:
        cases = []
        for case in suite:
            result = None
            if case.result:
                result = {
                    "status": type(case.result[0]).__name__,
                    "message": case.result[0].message or "",
                }
            cases.append({"name": case.name, "result": result})

        name = suite.name or ""
        suites.append(
            {
                "name": name,
                "depth": name.count(PATH_SEPARATOR),
                "tests": len(cases),
                "failures": sum(1 for c in cases if c["result"] is not None),
                "cases": cases,
            }
        )

    total_tests = sum(s["tests"] for s in suites)
    total_failures = sum(s["failures"] for s in suites)

    tmpl_dir = Path(__file__).parent / "templates"
    env = Environment(loader=FileSystemLoader(str(tmpl_dir)), autoescape=True)
    template = env.get_template("report.html.j2")

    html = template.render(
        title=xml.name or "treetest",
        suites=suites,
        total_tests=total_tests,
        total_failures=total_failures,
        passed=total_failures == 0,
    )
    report_path.parent.mkdir(parents=True, exist_ok=True)
    report_path.write_text(html, encoding="utf-8")
    return report_path
