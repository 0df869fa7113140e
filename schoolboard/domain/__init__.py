"""Board records (posts, per-class collections, the whole document)."""
