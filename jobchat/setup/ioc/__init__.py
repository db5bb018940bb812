from jobchat.setup.ioc.container import (
    AppProvider,
    InMemoryProvider,
    create_container,
)

__all__ = ["AppProvider", "InMemoryProvider", "create_container"]
