import threading


class Singleton(type):
    """
    Metaclass which creates a single instance per class.

    Arguments of the first call are used, later calls return the same instance.
    Use `Singleton.clear(cls)` to drop the instance (e.g. in tests).
    """

    _instances: dict[type, object] = {}
    _lock = threading.Lock()

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            with cls._lock:
                if cls not in cls._instances:
                    cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]

    @staticmethod
    def clear(cls: type) -> None:
        Singleton._instances.pop(cls, None)
