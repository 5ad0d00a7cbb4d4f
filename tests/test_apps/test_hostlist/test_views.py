"""Tests for hostlist HTTP view."""

import itertools

import pytest
from django.urls import reverse

from server.apps.hostlist.infrastructure import scanner

_OCTET_STREAM = 'application/octet-stream'


@pytest.fixture
def hostlist_url():
    """Resolve the hostlist endpoint URL.

    Returns:
        URL path of the hostlist view.
    """
    return reverse('hostlist:hostlist')


def _body(response) -> bytes:
    """Collect a streaming response body."""
    return b''.join(response.streaming_content)


class TestHostlistView:
    """Tests for hostlist view."""

    def test_serves_permutation_of_all_files(
        self,
        client,
        hostlist_url,
        hostlist_settings,
        sample_hellos,
    ):
        """Test body is a concatenation of every host file in some order."""
        response = client.get(hostlist_url)

        assert response.status_code == 200
        assert response['Content-Type'] == _OCTET_STREAM

        body = _body(response)
        payloads = list(sample_hellos.values())
        assert len(body) == sum(len(payload) for payload in payloads)
        assert any(
            body == b''.join(order)
            for order in itertools.permutations(payloads)
        )

    def test_excluded_files_never_served(
        self,
        client,
        hostlist_url,
        hostlist_settings,
    ):
        """Test files outside the allow-list are not in the body."""
        body = _body(client.get(hostlist_url))

        assert b'nat-hello' not in body
        assert b'not a host file' not in body
        assert b'backup' not in body
        assert b'hidden' not in body

    def test_empty_directory(self, client, hostlist_url, settings, tmp_path):
        """Test empty host directory yields 200 with empty body."""
        settings.HOSTLIST_DIRECTORY = str(tmp_path)

        response = client.get(hostlist_url)

        assert response.status_code == 200
        assert response['Content-Type'] == _OCTET_STREAM
        assert _body(response) == b''

    def test_unreadable_directory(
        self,
        client,
        hostlist_url,
        settings,
        tmp_path,
    ):
        """Test missing directory yields a plain-text error response."""
        missing = str(tmp_path / 'missing')
        settings.HOSTLIST_DIRECTORY = missing

        response = client.get(hostlist_url)

        assert response.status_code == 500
        assert response['Content-Type'] == 'text/plain'
        assert response.content == f'Cannot open directory {missing}.'.encode()

    def test_permission_denied_directory(
        self,
        client,
        hostlist_url,
        hostlist_settings,
        host_directory,
        monkeypatch,
    ):
        """Test a directory that cannot be read yields the error response."""

        def deny(path):
            raise PermissionError(13, 'Permission denied', path)

        monkeypatch.setattr(scanner.os, 'scandir', deny)

        response = client.get(hostlist_url)

        assert response.status_code == 500
        assert response['Content-Type'] == 'text/plain'
        assert response.content == (
            f'Cannot open directory {host_directory}.'.encode()
        )

    def test_head_error_has_no_body(
        self,
        client,
        hostlist_url,
        settings,
        tmp_path,
    ):
        """Test HEAD on a missing directory keeps the status only."""
        settings.HOSTLIST_DIRECTORY = str(tmp_path / 'missing')

        response = client.head(hostlist_url)

        assert response.status_code == 500
        assert response.content == b''

    def test_unreadable_directory_is_deterministic(
        self,
        client,
        hostlist_url,
        settings,
        tmp_path,
    ):
        """Test repeated failures produce identical responses."""
        settings.HOSTLIST_DIRECTORY = str(tmp_path / 'missing')

        first = client.get(hostlist_url)
        second = client.get(hostlist_url)

        assert first.content == second.content

    def test_protocol_bitmap(
        self,
        client,
        hostlist_url,
        hostlist_settings,
        sample_hellos,
    ):
        """Test ``p`` argument narrows served transports."""
        response = client.get(hostlist_url, {'p': str(1 << 17)})

        assert _body(response) == sample_hellos['17']

    def test_invalid_protocol_bitmap_serves_all(
        self,
        client,
        hostlist_url,
        hostlist_settings,
        sample_hellos,
    ):
        """Test malformed ``p`` argument is ignored."""
        response = client.get(hostlist_url, {'p': 'tcp'})

        expected = sum(len(payload) for payload in sample_hellos.values())
        assert len(_body(response)) == expected

    def test_rereads_directory_per_request(
        self,
        client,
        hostlist_url,
        hostlist_settings,
        host_directory,
        sample_hellos,
    ):
        """Test files added between requests are picked up."""
        (host_directory / 'NEWPEER.8').write_bytes(b'http-hello')

        body = _body(client.get(hostlist_url, {'p': str(1 << 8)}))

        assert body == b'http-hello'

    def test_head_allowed(self, client, hostlist_url, hostlist_settings):
        """Test HEAD is answered like GET."""
        response = client.head(hostlist_url)

        assert response.status_code == 200
        assert response['Content-Type'] == _OCTET_STREAM

    @pytest.mark.parametrize('method', ['post', 'put', 'delete'])
    def test_other_methods_rejected(
        self,
        client,
        hostlist_url,
        hostlist_settings,
        method,
    ):
        """Test only GET and HEAD are supported."""
        response = getattr(client, method)(hostlist_url)

        assert response.status_code == 405
