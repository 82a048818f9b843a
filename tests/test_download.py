"""
Tests for archive downloads over a mocked httpx transport
"""
import asyncio

import httpx
import pytest

from install_llvm.core.download import Downloader, temp_download_path
from install_llvm.errors import ErrorKind, InstallError

URL = 'https://github.com/mun-lang/llvm-package-windows/releases/download/v8.0.1/llvm.7z'


def transport(handler):
    return httpx.MockTransport(handler)


class TestDownloader:

    def test_writes_body(self, tmp_path):
        downloader = Downloader(transport=transport(lambda request: httpx.Response(200, content=b'7z\xbc\xaf')))
        dest = asyncio.run(downloader.download(URL, tmp_path / 'llvm.7z'))

        assert dest == tmp_path / 'llvm.7z'
        assert dest.read_bytes() == b'7z\xbc\xaf'

    def test_default_destination_in_runner_temp(self, tmp_path):
        downloader = Downloader(
            environ={'RUNNER_TEMP': str(tmp_path)},
            transport=transport(lambda request: httpx.Response(200, content=b'data')),
        )
        dest = asyncio.run(downloader.download(URL))

        assert dest.parent == tmp_path
        assert dest.read_bytes() == b'data'

    def test_follows_redirects(self, tmp_path):
        def handler(request):
            if request.url.host == 'github.com':
                return httpx.Response(302, headers={'Location': 'https://objects.example.com/llvm.7z'})
            return httpx.Response(200, content=b'moved')

        dest = asyncio.run(Downloader(transport=transport(handler)).download(URL, tmp_path / 'a'))

        assert dest.read_bytes() == b'moved'

    def test_http_error_status(self, tmp_path):
        downloader = Downloader(transport=transport(lambda request: httpx.Response(404)))

        with pytest.raises(InstallError) as exc_info:
            asyncio.run(downloader.download(URL, tmp_path / 'a'))

        assert exc_info.value.kind == ErrorKind.COMMAND_FAILED
        assert str(exc_info.value) == 'Unexpected HTTP response: 404'

    def test_transport_error(self, tmp_path):
        def handler(request):
            raise httpx.ConnectError('connection refused', request=request)

        with pytest.raises(InstallError) as exc_info:
            asyncio.run(Downloader(transport=transport(handler)).download(URL, tmp_path / 'a'))

        assert exc_info.value.kind == ErrorKind.COMMAND_FAILED
        assert URL in str(exc_info.value)


class TestTempDownloadPath:

    def test_unique(self, tmp_path):
        environ = {'RUNNER_TEMP': str(tmp_path)}

        assert temp_download_path(environ) != temp_download_path(environ)

    def test_system_temp_outside_ci(self, tmp_path, monkeypatch):
        monkeypatch.setattr('tempfile.gettempdir', lambda: str(tmp_path))

        assert temp_download_path({}).parent == tmp_path
