import pytest

from entropass.config import CharacterClass, GenerationOptions
from entropass.errors import Err, Ok, ValidationError, ValidationErrorKind
from entropass.validation import validate_options


@pytest.mark.parametrize("length", [8, 16, 64])
def test_lengths_in_range_are_accepted(length):
    assert validate_options(GenerationOptions(length)) == Ok(None)


@pytest.mark.parametrize("length", [-1, 0, 7, 65, 1000])
def test_lengths_out_of_range_are_rejected(length):
    result = validate_options(GenerationOptions(length))
    assert result.is_err()
    assert result.error.kind is ValidationErrorKind.INVALID_LENGTH
    assert str(result.error) == "Password length must be between 8 and 64"


@pytest.mark.parametrize("length", [16.0, "16", True])
def test_non_integer_length_is_rejected(length):
    result = validate_options(GenerationOptions(length))
    assert result.error.kind is ValidationErrorKind.INVALID_LENGTH


@pytest.mark.parametrize("length", [7, 16, 65])
def test_no_class_selected_wins_regardless_of_length(length):
    options = GenerationOptions.from_flags(length, False, False, False, False)
    result = validate_options(options)
    assert isinstance(result, Err)
    assert result.error.kind is ValidationErrorKind.NO_CHARACTER_CLASS_SELECTED


def test_single_class_is_enough():
    options = GenerationOptions(8, {CharacterClass.SYMBOLS})
    assert validate_options(options).is_ok()


def test_err_unwrap_raises_the_validation_error():
    result = validate_options(GenerationOptions(3))
    with pytest.raises(ValidationError) as excinfo:
        result.unwrap()
    assert excinfo.value.kind is ValidationErrorKind.INVALID_LENGTH


def test_options_store_a_frozenset():
    options = GenerationOptions(12, [CharacterClass.NUMBERS, CharacterClass.NUMBERS])
    assert options.enabled_classes == frozenset({CharacterClass.NUMBERS})
    assert hash(options) == hash(GenerationOptions(12, {CharacterClass.NUMBERS}))


@pytest.mark.parametrize("classes", [{"uppercase"}, {CharacterClass.NUMBERS, 3}])
def test_options_reject_unknown_classes(classes):
    with pytest.raises(ValueError):
        GenerationOptions(16, classes)


def test_from_flags_maps_each_switch():
    options = GenerationOptions.from_flags(20, uppercase=True, lowercase=False, numbers=True, symbols=False)
    assert options.length == 20
    assert options.ordered_classes() == [CharacterClass.UPPERCASE, CharacterClass.NUMBERS]
