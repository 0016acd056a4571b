from pathlib import Path


def get_sample_data_dir() -> Path:
    """
    Starting from the current file's directory, walk upwards until we find a folder named 'tests'.
    Then return the path to 'tests/sample_data'.
    If not found, raise an error.
    """
    current_dir = Path(__file__).parent.absolute()

    while True:
        if current_dir.name == "tests":
            return current_dir / "sample_data"

        parent_dir = current_dir.parent
        if parent_dir == current_dir:
            raise RuntimeError("Could not locate a 'tests' directory in the path hierarchy.")

        current_dir = parent_dir


def get_sample_data_path(filename: str) -> Path:
    return get_sample_data_dir() / filename
