import logging
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Mapping, Optional

from .core.params import ProcessingParams
from .core.pipeline import process

logger = logging.getLogger(__name__)

Message = Mapping[str, Any]


def handle_message(message: Message) -> Optional[dict[str, Any]]:
    """
    Handle one request message.

    A 'process' request carries width, height, the raw RGBA bytes and the
    processing params. The reply is either

        {'type': 'processed', 'imageData': {'width', 'height', 'data'}}

    or, when anything fails, {'type': 'error', 'error': <description>}.
    Messages of any other type are ignored and yield None.
    """
    if message.get('type') != 'process':
        return None

    try:
        width = int(message['width'])
        height = int(message['height'])
        params = ProcessingParams.from_dict(message['params'])
        result = process(message['data'], width, height, params)
        return {
            'type': 'processed',
            'imageData': {
                'width': result.width,
                'height': result.height,
                'data': result.data,
            },
        }
    except Exception as exc:
        logger.exception("Error in worker")
        return {'type': 'error', 'error': str(exc)}


class ImageWorker:
    """
    Background worker running one request at a time.

    Requests are queued on a single-thread executor, so each is fully
    processed before the next one starts and no buffers are shared.
    """

    def __init__(self) -> None:
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="monodither-worker")

    def submit(self, message: Message) -> "Future[Optional[dict[str, Any]]]":
        return self._executor.submit(handle_message, message)

    def close(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "ImageWorker":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
