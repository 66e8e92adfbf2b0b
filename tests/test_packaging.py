from pathlib import Path

PYPROJECT = Path(__file__).resolve().parent.parent / "pyproject.toml"


def test_directly_imported_distributions_are_declared():
    text = PYPROJECT.read_text(encoding="utf-8")
    dependencies = text.split("dependencies = [", 1)[1].split("]", 1)[0]

    for distribution in ("boto3", "botocore", "requests"):
        assert f'"{distribution}' in dependencies
