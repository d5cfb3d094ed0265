"""Export utilities for dashboard data."""

from pathlib import Path

from xaffiliates.models.dashboard import DashboardData


def to_json(data: DashboardData, indent: int = 2) -> str:
    """
    Convert DashboardData to JSON string.

    Args:
        data: DashboardData to serialize
        indent: JSON indentation level

    Returns:
        JSON string
    """
    return data.model_dump_json(indent=indent)


def save_json(
    data: DashboardData,
    filepath: str | Path,
    indent: int = 2,
) -> Path:
    """
    Save DashboardData to JSON file.

    Args:
        data: DashboardData to save
        filepath: Output file path
        indent: JSON indentation level

    Returns:
        Path to saved file
    """
    path = Path(filepath)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(to_json(data, indent=indent), encoding="utf-8")
    return path
