"""Per-kind shared collections of game items."""


class Registry:
    """A shared list of items of one kind; one registry exists per kind."""

    _instances = {}

    def __init__(self, items=()):
        self._items = list(items)

    @classmethod
    def get_instance(cls, kind):
        """Return the registry for kind, creating an empty one if needed."""
        if kind not in cls._instances:
            cls._instances[kind] = cls()
        return cls._instances[kind]

    @classmethod
    def create_instance(cls, kind, items):
        """Replace the registry for kind with one holding items and return it."""
        registry = cls(items)
        cls._instances[kind] = registry
        return registry

    def add(self, item):
        """Append an item."""
        self._items.append(item)

    def items(self):
        """Return the stored items in insertion order."""
        return list(self._items)

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)


class RegistryBuilder:
    """Collects items and installs them as the registry for a kind."""

    def __init__(self, kind):
        self._kind = kind
        self._items = []

    def add(self, item):
        """Queue an item and return the builder."""
        self._items.append(item)
        return self

    def build(self):
        """Install the collected items as the registry for the kind."""
        return Registry.create_instance(self._kind, self._items)