"""
Unit tests for procedure declarations and the registry.
"""

from unittest.mock import Mock

import pytest
from pydantic import BaseModel, ValidationError

from procbus import (
    ProcedureDefinitionError,
    ProcedureNotFoundError,
    ProcedureRegistry,
    define_procedure,
    normalize_path,
)


class EchoInput(BaseModel):
    text: str


class EchoOutput(BaseModel):
    echoed: str


def echo_procedure(handler=None, path=('test', 'echo')):
    return define_procedure(
        list(path),
        handler or (lambda payload: {'echoed': payload.text}),
        input_model=EchoInput,
        output_model=EchoOutput,
        meta={'description': 'Echo text back'},
    )


class TestDefineProcedure:
    """Test define_procedure"""

    def test_builds_declaration(self):
        """Should carry path, contracts and metadata"""
        procedure = echo_procedure()

        assert procedure.path == ('test', 'echo')
        assert procedure.key == 'test.echo'
        assert procedure.description == 'Echo text back'
        assert procedure.input_model is EchoInput

    def test_dotted_path(self):
        """Should accept dotted strings"""
        assert normalize_path('log.info') == ('log', 'info')

    @pytest.mark.parametrize('path', ['', [], ['log', ''], 'log..info'])
    def test_invalid_paths(self, path):
        """Should reject empty paths and segments"""
        with pytest.raises(ProcedureDefinitionError):
            define_procedure(path, lambda: None)

    def test_handler_must_be_callable(self):
        """Should reject non-callable handlers"""
        with pytest.raises(ProcedureDefinitionError):
            define_procedure('a.b', 'not callable')

    def test_declaration_is_immutable(self):
        """Should not allow mutation after creation"""
        procedure = echo_procedure()
        with pytest.raises(Exception):
            procedure.path = ('other',)
        with pytest.raises(TypeError):
            procedure.meta['description'] = 'changed'


class TestProcedureRegistry:
    """Test ProcedureRegistry"""

    def test_call_validates_and_dumps(self):
        """Should validate input, run the handler and return a dict"""
        registry = ProcedureRegistry()
        registry.register([echo_procedure()])

        assert registry.call(['test', 'echo'], {'text': 'hi'}) == {'echoed': 'hi'}
        assert registry.call('test.echo', EchoInput(text='model')) == {'echoed': 'model'}

    def test_invalid_input_never_reaches_handler(self):
        """Should raise ValidationError before the handler runs"""
        handler = Mock(return_value={'echoed': 'x'})
        registry = ProcedureRegistry()
        registry.register([echo_procedure(handler)])

        with pytest.raises(ValidationError):
            registry.call('test.echo', {'text': 123})
        with pytest.raises(ValidationError):
            registry.call('test.echo')

        handler.assert_not_called()

    def test_invalid_output_raises(self):
        """Should reject handler results that break the output contract"""
        registry = ProcedureRegistry()
        registry.register([echo_procedure(lambda payload: {'wrong': True})])

        with pytest.raises(ValidationError):
            registry.call('test.echo', {'text': 'hi'})

    def test_no_input_model_calls_without_arguments(self):
        """Should call handlers without input contract with no arguments"""
        registry = ProcedureRegistry()
        registry.register([define_procedure('test.ping', lambda: 'pong')])

        assert registry.call('test.ping', {'ignored': True}) == 'pong'

    def test_unknown_path(self):
        """Should raise ProcedureNotFoundError (a KeyError)"""
        registry = ProcedureRegistry()

        with pytest.raises(ProcedureNotFoundError) as exc_info:
            registry.call('missing.path')

        assert isinstance(exc_info.value, KeyError)
        assert 'missing.path' in str(exc_info.value)

    def test_handler_errors_propagate(self):
        """Should not wrap handler exceptions"""
        def boom(payload):
            raise RuntimeError('transport down')

        registry = ProcedureRegistry()
        registry.register([echo_procedure(boom)])

        with pytest.raises(RuntimeError, match='transport down'):
            registry.call('test.echo', {'text': 'hi'})

    def test_register_replaces_same_path(self):
        """Should keep exactly one procedure per path"""
        first = Mock(return_value={'echoed': 'first'})
        second = Mock(return_value={'echoed': 'second'})
        registry = ProcedureRegistry()

        registry.register([echo_procedure(first)])
        registry.register([echo_procedure(second)])
        result = registry.call('test.echo', {'text': 'hi'})

        assert len(registry) == 1
        assert result == {'echoed': 'second'}
        first.assert_not_called()
        second.assert_called_once()

    def test_listing_and_membership(self):
        """Should list procedures sorted by path"""
        registry = ProcedureRegistry()
        registry.register([echo_procedure(path=('b', 'x')), echo_procedure(path=('a', 'y'))])

        assert [p.key for p in registry.procedures()] == ['a.y', 'b.x']
        assert ['a', 'y'] in registry
        assert 'c.z' not in registry

    def test_unregister(self):
        """Should remove a bound path"""
        registry = ProcedureRegistry()
        registry.register([echo_procedure()])

        assert registry.unregister('test.echo') is True
        assert registry.unregister('test.echo') is False
        assert len(registry) == 0

    @pytest.mark.parametrize('path', ['log..info', '', ['log', '']])
    def test_malformed_path_is_not_found(self, path):
        """Should report malformed call paths as unknown procedures"""
        registry = ProcedureRegistry()
        registry.register([echo_procedure()])

        with pytest.raises(ProcedureNotFoundError):
            registry.call(path, {'text': 'hi'})
        assert path not in registry
        assert registry.unregister(path) is False

    def test_no_input_model_ignores_payload(self):
        """Should ignore payloads for procedures that take no input"""
        handler = Mock(return_value='pong')
        registry = ProcedureRegistry()
        registry.register([define_procedure('test.ping', handler)])

        assert registry.call('test.ping', {'junk': 1}) == 'pong'
        handler.assert_called_once_with()
