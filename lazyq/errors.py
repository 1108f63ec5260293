class EmptySequenceError(ValueError):
    """raised by strict accessors (first, last, min, max) on a sequence with no elements"""
    pass
