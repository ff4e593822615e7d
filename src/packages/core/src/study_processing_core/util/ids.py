"""ID generation utilities."""
import uuid


def generate_id() -> str:
    """Generate a unique ID."""
    return str(uuid.uuid4())


def chunk_id(parent_id: str, position: int) -> str:
    """Build the ID of the chunk at a 1-indexed position within its parent."""
    return f"{parent_id}_{position}"
