"""Static file serving with a single-page-application fallback."""

import errno
import logging
import os
import stat
from typing import Optional, Tuple

from starlette.concurrency import run_in_threadpool
from starlette.datastructures import URL
from starlette.responses import PlainTextResponse, RedirectResponse, Response
from starlette.staticfiles import StaticFiles
from starlette.types import Scope

logger = logging.getLogger(__name__)


def _ensure_readable(full_path: str) -> None:
    """Open the file once so permission problems surface before headers go out."""
    with open(full_path, "rb"):
        pass


class SPAStaticFiles(StaticFiles):
    """
    Serve files from ``directory`` and answer every unmatched path with
    ``fallback`` (status 200) so client-side routing can take over.

    - Regular file under the root: served as-is, content type from extension.
    - Directory: its ``index.html`` if present, otherwise the fallback.
    - Anything escaping the root (``..``, outside symlinks): the fallback.
    - Read errors on a resolved file: 500 for that request only.

    Unlike ``StaticFiles`` every HTTP method is served the same way.
    """

    def __init__(self, *, directory: str, fallback: str, **kwargs) -> None:
        kwargs.setdefault("html", True)
        super().__init__(directory=directory, **kwargs)
        self.fallback = fallback

    async def get_response(self, path: str, scope: Scope) -> Response:
        try:
            full_path, stat_result = await self._lookup(path)
        except OSError as e:
            logger.error(f"Failed to resolve {scope['path']!r}: {e}")
            return PlainTextResponse("Internal Server Error", status_code=500)

        if stat_result and stat.S_ISREG(stat_result.st_mode):
            return await self._serve(full_path, stat_result, scope)

        if stat_result and stat.S_ISDIR(stat_result.st_mode) and self.html:
            index_path = os.path.join(path, "index.html")
            try:
                full_path, stat_result = await self._lookup(index_path)
            except OSError as e:
                logger.error(f"Failed to resolve {scope['path']!r}: {e}")
                return PlainTextResponse("Internal Server Error", status_code=500)
            if stat_result and stat.S_ISREG(stat_result.st_mode):
                if not scope["path"].endswith("/"):
                    # Relative links in the index only work under a trailing slash
                    url = URL(scope=scope)
                    url = url.replace(path=url.path + "/")
                    return RedirectResponse(url=url)
                return await self._serve(full_path, stat_result, scope)

        return await self.fallback_response(scope)

    async def fallback_response(self, scope: Scope) -> Response:
        """Return the fallback document with status 200."""
        logger.debug(f"No asset for {scope['path']!r}, serving fallback")
        try:
            stat_result = await run_in_threadpool(os.stat, self.fallback)
        except (FileNotFoundError, NotADirectoryError):
            logger.warning(f"Fallback file {self.fallback} is missing")
            return PlainTextResponse("Not Found", status_code=404)
        except OSError as e:
            logger.error(f"Failed to stat fallback file {self.fallback}: {e}")
            return PlainTextResponse("Internal Server Error", status_code=500)
        return await self._serve(self.fallback, stat_result, scope)

    async def _lookup(self, path: str) -> Tuple[str, Optional[os.stat_result]]:
        try:
            return await run_in_threadpool(self.lookup_path, path)
        except ValueError:
            # Embedded NUL byte; no such file can exist
            return "", None
        except OSError as e:
            if e.errno == errno.ENAMETOOLONG:
                return "", None
            raise

    async def _serve(
        self, full_path: str, stat_result: os.stat_result, scope: Scope
    ) -> Response:
        try:
            await run_in_threadpool(_ensure_readable, full_path)
        except OSError as e:
            logger.error(f"Failed to read {full_path}: {e}")
            return PlainTextResponse("Internal Server Error", status_code=500)
        return self.file_response(full_path, stat_result, scope)
