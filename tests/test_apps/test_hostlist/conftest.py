"""Shared fixtures for hostlist app tests."""

import pytest

# Protocol number -> HELO payload for the sample host directory
_SAMPLE_HELLOS = {
    '6': b'tcp-hello-payload',
    '17': b'udp-hello',
    '25': b'smtp-hello-with-longer-body',
}


@pytest.fixture
def host_directory(tmp_path):
    """Create a host directory with matching and non-matching entries.

    Args:
        tmp_path: Pytest temporary directory.

    Returns:
        Path to the populated host directory.
    """
    directory = tmp_path / 'hosts'
    directory.mkdir()

    for protocol, payload in _SAMPLE_HELLOS.items():
        (directory / f'PEER{protocol}.{protocol}').write_bytes(payload)

    # Not on the allow-list
    (directory / 'PEERNAT.1').write_bytes(b'nat-hello')
    (directory / 'README').write_bytes(b'not a host file')
    (directory / 'PEER6.6.bak').write_bytes(b'backup')
    (directory / '.6').write_bytes(b'hidden')
    # Directories never qualify, even with a matching suffix
    (directory / 'nested.8').mkdir()

    return directory


@pytest.fixture
def sample_hellos():
    """HELO payloads written by the host_directory fixture.

    Returns:
        Mapping of protocol number to file content.
    """
    return dict(_SAMPLE_HELLOS)


@pytest.fixture
def allowed_extensions():
    """Default transport allow-list.

    Returns:
        Frozenset of protocol number tokens.
    """
    return frozenset(('6', '8', '12', '17', '23', '25'))


@pytest.fixture
def hostlist_settings(settings, host_directory, allowed_extensions):
    """Point the hostlist settings at the sample host directory.

    Args:
        settings: pytest-django settings fixture.
        host_directory: Sample host directory fixture.
        allowed_extensions: Allow-list fixture.

    Returns:
        Overridden settings object.
    """
    settings.HOSTLIST_DIRECTORY = str(host_directory)
    settings.HOSTLIST_EXTENSIONS = allowed_extensions
    settings.HOSTLIST_CHUNK_SIZE = 4
    return settings
