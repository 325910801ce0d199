"""Integration tests: remote log calls over HTTP into the shared logger"""
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

import client_logger
from client_logger import LogLevel, RemoteError, create_logger, create_memory_transport, get_logger, set_logger
from procbus import default_registry
from procbus.client import ProcedureClient, RemoteCallError
from procbus.http import create_app


@pytest.fixture
def memory():
    """Route the shared logger to memory for the duration of a test"""
    previous = get_logger()
    transport = create_memory_transport()
    set_logger(create_logger(level=LogLevel.INFO, context='client', transports=[transport]))
    yield transport
    set_logger(previous)


@pytest.fixture
def remote():
    """ProcedureClient whose requests are served by the in-process app"""
    test_client = TestClient(create_app(default_registry))

    def post(url, json=None, timeout=None):
        return test_client.post(url, json=json)

    def get(url, timeout=None):
        return test_client.get(url)

    with patch('procbus.client.requests.post', side_effect=post), \
         patch('procbus.client.requests.get', side_effect=get):
        yield ProcedureClient('http://testserver')


@pytest.mark.integration
def test_remote_error_log_flow(memory, remote):
    """
    Test complete remote logging flow:
    1. Client serializes a failure and calls log.error over HTTP
    2. Server validates and normalizes the payload
    3. Shared logger receives a rebuilt error
    """
    try:
        raise TimeoutError('upstream timed out')
    except TimeoutError as e:
        error = client_logger.serialize_error(e)

    result = remote.call(['log', 'error'], {
        'message': 'Sync failed',
        'context': 'sync-worker',
        'data': {'attempt': 3},
        'error': error,
    })

    assert result == {'logged': True}
    entry = memory.entries[0]
    assert entry.message == 'Sync failed'
    assert entry.context == 'sync-worker'
    assert entry.data == {'attempt': 3}
    assert isinstance(entry.error, RemoteError)
    assert entry.error.name == 'TimeoutError'
    assert entry.error.stack == error['stack']


@pytest.mark.integration
def test_remote_level_control(memory, remote):
    """Test raising the level remotely filters later remote calls"""
    assert remote.call('log.setLevel', {'level': 'error'}) == {'logged': True}
    assert remote.call('log.getLevel') == {'level': 40, 'levelName': 'ERROR'}

    assert remote.call('log.info', {'message': 'filtered'}) == {'logged': True}
    assert memory.entries == []


@pytest.mark.integration
def test_remote_listing_and_errors(memory, remote):
    paths = {p['path'] for p in remote.list_procedures()}
    assert {'log.info', 'log.setLevel', 'log.getLevel'} <= paths

    with pytest.raises(RemoteCallError) as exc_info:
        remote.call('log.info', {'context': 'missing message'})
    assert exc_info.value.status_code == 422
