"""Infrastructure implementations of domain interfaces."""
