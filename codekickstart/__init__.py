"""CodeKickstart backend: language catalog, bookmarks and AI tutor chat."""
