"""Infrastructure services - backends the change tracker dispatches to."""
