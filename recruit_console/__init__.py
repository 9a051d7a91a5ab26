"""Client-side controllers for the recruiting dashboard's candidate and interview screens."""

__version__ = "0.1.0"
