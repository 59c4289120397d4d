from pathlib import Path

root_path = Path(__file__).parents[2]

log_paths = root_path / "logs"
