"""Menu loading, normalization, catalog index and in-memory query engine."""
from .loader import detect_delimiter, fetch_source, load_menu_text, parse_csv_text, validate_upload
from .store import MenuStore
from .schemas import CatalogIndex, LoadResult, MenuItem
from .normalize import normalize_frame, normalize_rows
from .catalog import build_index
