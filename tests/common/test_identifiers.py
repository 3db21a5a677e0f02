from src.employee_scheduling.employee_scheduling.common.identifiers import next_identifier


def test_next_identifier_increments_highest_suffix():
    assert next_identifier(["E001", "E007", "E003"], prefix="E") == "E008"


def test_next_identifier_starts_at_one():
    assert next_identifier([], prefix="E") == "E001"


def test_next_identifier_skips_non_numeric_suffixes():
    assert next_identifier(["E002", "EX", "E"], prefix="E") == "E003"


def test_next_identifier_grows_past_padding():
    assert next_identifier(["E999"], prefix="E") == "E1000"
