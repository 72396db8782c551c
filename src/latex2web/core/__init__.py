"""Format-independent building blocks of the conversion pipeline."""
