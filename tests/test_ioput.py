"""Errors, output display and I/O utilities unit tests."""

import numpy as np
import pytest

import kinemapy.ioput.ioutilities as ioutil
from kinemapy.ioput.info import displayinfo
from kinemapy.ioput.errors import (
    KinematicsError,
    ShapeError,
    DomainError,
    ParameterError,
    chain_error,
    get_error_chain,
    displayerror,
)
from kinemapy.kinematics.configurationmaps import push_forward_pk2_stress


@pytest.fixture
def screen_file(tmp_path, monkeypatch):
    screen_file_path = tmp_path / 'session.screen'
    monkeypatch.setattr(ioutil, 'screen_file_path', str(screen_file_path))
    return screen_file_path


class TestErrors:
    """Kinematics errors and causal chain"""

    def test_error_hierarchy(self):
        for error_class in (ShapeError, DomainError, ParameterError):
            error = error_class('operation', 'message')
            assert isinstance(error, KinematicsError)
            assert isinstance(error, RuntimeError)
            assert str(error) == 'operation: message'

    def test_chain_error_keeps_category(self):
        error = DomainError('inner', 'Inner message.')
        wrapper = chain_error(error, 'outer', 'Outer message.')
        assert type(wrapper) is DomainError
        assert wrapper.operation == 'outer'
        wrapper = chain_error(ValueError('foreign'), 'outer', 'Outer.')
        assert type(wrapper) is KinematicsError

    def test_error_chain(self):
        with pytest.raises(DomainError) as excinfo:
            push_forward_pk2_stress(np.ones(9), np.zeros(9), is_tangent=True)
        error_chain = get_error_chain(excinfo.value)
        operations = [record[0] for record in error_chain]
        assert operations == ['push_forward_pk2_stress (tangent)',
                              'push_forward_pk2_stress']
        assert all(isinstance(message, str) and message
                   for _, message in error_chain)

    def test_foreign_cause(self):
        try:
            try:
                raise ValueError('bad value')
            except ValueError as err:
                raise ShapeError('outer', 'Outer message.') from err
        except ShapeError as err:
            error_chain = get_error_chain(err)
        assert error_chain == [('outer', 'Outer message.'),
                               ('ValueError', 'bad value')]

    def test_display_error(self, capsys, screen_file):
        inner = DomainError('inner_operation', 'Inner message.')
        try:
            raise chain_error(inner, 'outer_operation', 'Outer message.') \
                from inner
        except DomainError as err:
            displayerror(err)
        output = capsys.readouterr().out
        assert '!! Error !!' in output
        assert 'DomainError' in output
        assert output.index('outer_operation') < \
            output.index('inner_operation')
        screen_output = screen_file.read_text(encoding='utf-8')
        assert 'Inner message.' in screen_output
        assert '\x1b[' not in screen_output


class TestIOUtilities:
    """Output display and scalar validation tools"""

    def test_print2_without_screen_file(self, capsys, monkeypatch):
        monkeypatch.setattr(ioutil, 'screen_file_path', None)
        ioutil.print2('message')
        assert capsys.readouterr().out == 'message\n'

    def test_escape_ansi(self):
        assert ioutil.escapeANSI('\x1b[31mred\x1b[0m') == 'red'

    @pytest.mark.parametrize('x, is_number', [
        (1, True), (2.5, True), ('3.0', True), (np.float64(1.0), True),
        ('three', False), (None, False), ([1.0, 2.0], False)])
    def test_check_number(self, x, is_number):
        assert ioutil.checknumber(x) == is_number

    def test_is_between(self):
        assert ioutil.is_between(0.0)
        assert ioutil.is_between(1.0)
        assert not ioutil.is_between(1.0 + 1e-12)
        assert ioutil.is_between(5, lower_bound=-10, upper_bound=10)
        with pytest.raises(RuntimeError):
            ioutil.is_between(0.5, lower_bound=1, upper_bound=0)


class TestDisplayInfo:
    """Program execution information display"""

    def test_session(self, capsys, screen_file):
        displayinfo('0', 'test_session', 'Jan 01 2026', '10:00:00')
        displayinfo('5', 'Computing strain measures...')
        displayinfo('5', 'Nested task...', 2)
        displayinfo('1', 'Jan 01 2026', '10:01:00', 'test_session', 60.0)
        output = capsys.readouterr().out
        assert 'Session: ' in output
        assert '> Computing strain measures...' in output
        assert 'Session Completed' in output
        assert 'test_session' in screen_file.read_text(encoding='utf-8')

    def test_tangent_check(self, capsys):
        displayinfo('6', 'dE/dF', 1e-9, True)
        displayinfo('6', 'dE/dF', 1e-1, False)
        output = capsys.readouterr().out
        assert 'consistent' in output
        assert 'inconsistent' in output

    def test_evolution(self, capsys):
        displayinfo('7', 'init', 10, 0.1, 0.5, 1)
        displayinfo('7', 'step', 1, 0.1, 1.02, 0.01, 3.5)
        displayinfo('7', 'end')
        output = capsys.readouterr().out
        assert 'Deformation gradient evolution' in output
        assert '1.020000e+00' in output

    def test_unknown_code(self):
        with pytest.raises(RuntimeError):
            displayinfo('99')
        with pytest.raises(RuntimeError):
            displayinfo('7', 'unknown')
