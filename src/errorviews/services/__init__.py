"""Services for errorviews."""
