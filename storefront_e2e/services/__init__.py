"""Services: row patching, fixtures, upload dispatch, summary rendering."""
