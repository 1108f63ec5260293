class CountingSource:
    """a list-backed iterable that records how many elements were read and how many walks started"""

    def __init__(self, items):
        self.items = list(items)
        self.reads = 0
        self.walks = 0

    def __iter__(self):
        self.walks += 1
        for item in self.items:
            self.reads += 1
            yield item

    def __len__(self):
        return len(self.items)


class UnsizedSource(CountingSource):
    """same, but not Sized, so no element count is known up front"""
    __len__ = None
