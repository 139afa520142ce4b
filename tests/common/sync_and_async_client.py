import inspect
from typing import Any


class SyncAndAsyncClient:
    """Calls the sync or the async variant of a client method.

    The async variant of a method is the method name prefixed
    with "a" (request and arequest).
    """

    client: Any
    async_call: bool

    async def _execute_method(self, *args, **kwargs):
        method_name = inspect.stack()[1].function
        if self.async_call:
            return await getattr(self.client, f"a{method_name}")(
                *args, **kwargs
            )
        return getattr(self.client, method_name)(*args, **kwargs)
