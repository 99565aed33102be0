import threading


class Singleton(type):
    """
    Metaclass keeping one instance per class, created on the first call.
    Instruction:
        class Foo(metaclass=Singleton)
        Foo() is Foo()          # True
        Singleton.drop(Foo)     # next Foo() builds a fresh instance
    """
    _instance = {}
    _lock = threading.Lock()

    def __call__(cls, *args, **kwds):
        if cls not in cls._instance:
            with cls._lock:
                if cls not in cls._instance:
                    cls._instance[cls] = super().__call__(*args, **kwds)
        return cls._instance[cls]

    @classmethod
    def drop(mcs, cls: type) -> None:
        with mcs._lock:
            mcs._instance.pop(cls, None)
