"""Infrastructure layer: concrete storage behind the core interfaces."""
