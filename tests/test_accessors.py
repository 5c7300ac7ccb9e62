import io
import math

import pytest

from plainini import (
    ErrorKind,
    IniParser,
    KeyNotFound,
    SectionNotFound,
    TypeConversion,
    load,
)
from plainini.ini.accessors import INT_BITS, parse_bool, parse_float, parse_int


def make(body: str):
    return IniParser.readstream(io.StringIO('[s]\n' + body, newline='\n'))


def test_sample_values(sample_path):
    config = load(sample_path)
    assert config.get_int('database', 'port') == 5432
    assert config.get_int64('database', 'port') == 5432
    assert config.get_string('database', 'dbfile') == '/var/lib/app.db'
    assert config.get_string('database', 'url') == 'http://a=b'
    assert config.get_float64('database', 'ratio') == pytest.approx(2.5e-3)
    assert config.get_bool('database', 'debug') is True


def test_unknown_section():
    config = make('k=v\n')
    with pytest.raises(SectionNotFound) as exc:
        config.get_string('nope', 'k')
    assert exc.value.kind is ErrorKind.SECTION_NOT_FOUND
    assert exc.value.payload == 'nope'
    with pytest.raises(SectionNotFound):
        config.get_int('nope', 'k')


def test_unknown_key():
    config = make('k=v\n')
    with pytest.raises(KeyNotFound) as exc:
        config.get_string('s', 'missing')
    assert exc.value.kind is ErrorKind.KEY_NOT_FOUND
    assert exc.value.section == 's'
    assert exc.value.payload == 'missing'
    # still usable as a plain KeyError.
    with pytest.raises(KeyError):
        config.get_bool('s', 'missing')


def test_empty_value_reads_as_missing():
    config = make('k=\n')
    assert config.get_section('s')['k'] == ''
    with pytest.raises(KeyNotFound):
        config.get_string('s', 'k')
    with pytest.raises(KeyNotFound):
        config.get_int('s', 'k')


def test_int_conversion_error():
    config = make('port=abc\n')
    with pytest.raises(TypeConversion) as exc:
        config.get_int('s', 'port')
    err = exc.value
    assert err.kind is ErrorKind.TYPE_CONVERSION
    assert err.payload == 'abc'
    assert err.target == 'int'
    assert err.reason == 'invalid syntax'
    assert isinstance(err, ValueError)


def test_values_are_parsed_on_every_call():
    config = make('n=7\n')
    assert config.get_int('s', 'n') == 7
    assert config.get_string('s', 'n') == '7'
    assert config.get_float64('s', 'n') == 7.0


@pytest.mark.parametrize('text', ['1', 't', 'T', 'TRUE', 'true', 'True'])
def test_true_literals(text):
    assert parse_bool(text) is True


@pytest.mark.parametrize('text', ['0', 'f', 'F', 'FALSE', 'false', 'False'])
def test_false_literals(text):
    assert parse_bool(text) is False


@pytest.mark.parametrize('text', ['yes', 'no', 'tRuE', ' true', '2', 'on'])
def test_bad_bool(text):
    with pytest.raises(ValueError, match='invalid syntax'):
        parse_bool(text)


def test_bool_getter_wraps_error():
    config = make('flag=yes\n')
    with pytest.raises(TypeConversion, match='invalid syntax'):
        config.get_bool('s', 'flag')


@pytest.mark.parametrize('text, expected', [
    ('0', 0), ('42', 42), ('-17', -17), ('+8', 8), ('007', 7),
    ('9223372036854775807', 2 ** 63 - 1),
    ('-9223372036854775808', -2 ** 63),
])
def test_int64(text, expected):
    assert parse_int(text) == expected


@pytest.mark.parametrize('text', ['', ' 1', '1 ', '1_000', '0x10', '1.0', '--1', '١٢'])
def test_int_bad_syntax(text):
    with pytest.raises(ValueError, match='invalid syntax'):
        parse_int(text)


@pytest.mark.parametrize('text', ['9223372036854775808', '-9223372036854775809'])
def test_int64_out_of_range(text):
    with pytest.raises(ValueError, match='out of range'):
        parse_int(text)


def test_int32_width():
    assert parse_int('2147483647', 32) == 2 ** 31 - 1
    with pytest.raises(ValueError, match='out of range'):
        parse_int('2147483648', 32)


def test_int64_getter_overflow():
    config = make('big=99999999999999999999\n')
    with pytest.raises(TypeConversion) as exc:
        config.get_int64('s', 'big')
    assert exc.value.reason == 'value out of range'


@pytest.mark.parametrize('text, expected', [
    ('1', 1.0), ('-1.5', -1.5), ('1.', 1.0), ('.5', 0.5),
    ('6.02e23', 6.02e23), ('1E-3', 1e-3), ('+2.5e+2', 250.0),
    ('0x1p-2', 0.25), ('0X1.8P1', 3.0),
])
def test_float64(text, expected):
    assert parse_float(text) == expected


@pytest.mark.parametrize('text', ['inf', '+Inf', '-infinity', 'INF'])
def test_float_infinities(text):
    assert math.isinf(parse_float(text))


def test_float_nan():
    assert math.isnan(parse_float('NaN'))


@pytest.mark.parametrize('text', ['', 'abc', '1e', '1,5', '1_0.0', ' 1.0', '0x1.8', 'e5', '.'])
def test_float_bad_syntax(text):
    with pytest.raises(ValueError, match='invalid syntax'):
        parse_float(text)


def test_float_overflow():
    with pytest.raises(ValueError, match='out of range'):
        parse_float('1e400')


def test_int_getter_bounded_to_platform_width():
    limit = 1 << (INT_BITS - 1)
    config = make(f'top={limit - 1}\nover={limit}\nword=12abc\n')
    assert config.get_int('s', 'top') == limit - 1
    with pytest.raises(TypeConversion) as exc:
        config.get_int('s', 'over')
    assert exc.value.target == 'int'
    assert exc.value.reason == 'value out of range'
    with pytest.raises(TypeConversion, match='invalid syntax'):
        config.get_int('s', 'word')


def test_float64_getter_errors():
    config = make('r=1e400\nbad=1.5x\n')
    with pytest.raises(TypeConversion) as exc:
        config.get_float64('s', 'r')
    assert exc.value.target == 'float64'
    assert exc.value.payload == '1e400'
    assert exc.value.reason == 'value out of range'
    with pytest.raises(TypeConversion, match='invalid syntax'):
        config.get_float64('s', 'bad')
