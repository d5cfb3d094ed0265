"""Profile resolution, affiliate enumeration and page rendering."""
