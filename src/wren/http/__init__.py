"""HTTP value types shared by validation and routing."""
