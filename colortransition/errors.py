class TransitionDestroyedError(RuntimeError):
    """Raised when a destroyed ColorTransition is used before being re-initialised."""
