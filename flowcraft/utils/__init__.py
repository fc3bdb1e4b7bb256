from flowcraft.utils.file_utils import atomic_write_bytes, canonical_path, display_name, ensure_dir

__all__ = ["atomic_write_bytes", "canonical_path", "display_name", "ensure_dir"]
