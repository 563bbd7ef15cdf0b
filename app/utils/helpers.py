from datetime import datetime, timezone
from typing import List, Dict, Any
import re
import uuid

def generate_id() -> str:
    """Generate a random unique identifier"""
    return str(uuid.uuid4())

def get_utc_now() -> datetime:
    """Get current UTC datetime"""
    return datetime.now(timezone.utc)

def ensure_utc(dt: datetime) -> datetime:
    """Attach UTC to naive datetimes (SQLite drops the offset)"""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt

def format_local_datetime(dt: datetime) -> str:
    """
    Format datetime for display using the local timezone and the
    locale's date/time representation
    """
    return ensure_utc(dt).astimezone().strftime("%c")

def paginate_results(items: List[Any], page: int = 1, page_size: int = 10) -> Dict[str, Any]:
    """
    Paginate a list of items
    
    Args:
        items: List of items to paginate
        page: Page number (1-based)
        page_size: Number of items per page
        
    Returns:
        Dict containing paginated results and metadata
    """
    start = (page - 1) * page_size
    end = start + page_size
    
    total_items = len(items)
    total_pages = (total_items + page_size - 1) // page_size
    
    return {
        "items": items[start:end],
        "pagination": {
            "current_page": page,
            "total_pages": total_pages,
            "page_size": page_size,
            "total_items": total_items
        }
    }

def sanitize_filename(filename: str) -> str:
    """
    Sanitize a filename by removing invalid characters
    
    Args:
        filename: Original filename
        
    Returns:
        Sanitized filename
    """
    # Remove invalid characters
    filename = re.sub(r'[<>:"/\\|?*]', '', filename)
    # Remove control characters
    filename = "".join(char for char in filename if ord(char) >= 32)
    return filename.strip()
