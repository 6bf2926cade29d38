from starlette.responses import FileResponse
from starlette.types import Receive, Scope, Send

from ytframes.frame_pipeline.scratch import ScratchSpace


class ScratchFileResponse(FileResponse):
    """Streams a file out of a scratch space and removes the space afterwards.

    Removal runs whether or not sending succeeded, including when the client
    disconnects mid-stream and ``send`` raises.
    """

    def __init__(self, path: str, scratch: ScratchSpace, **kwargs):
        super().__init__(path, **kwargs)
        self.scratch = scratch

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        try:
            await super().__call__(scope, receive, send)
        finally:
            self.scratch.cleanup()
