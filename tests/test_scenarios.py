import pytest
from lazy import BinaryOperator, Function, NoSuchElementError
from scenarios import (
    SCENARIOS,
    Accumulator,
    ConsonantMethods,
    Devowelizer,
    LengthMapper,
    add,
    devowelize,
    length_of,
)


class TestSteps:
    """Test the three building blocks in each of their forms"""

    @pytest.mark.parametrize("name,expected", [
        ("Cristiano", "Crstn"),
        ("Michele", "Mchl"),
        ("Sergio", "Srg"),
        ("Giuseppe", "Gspp"),
        ("Stefano", "Stfn"),
    ])
    def test_devowelize(self, name, expected):
        assert devowelize(name) == expected
        assert ConsonantMethods.devowelize(name) == expected
        assert Devowelizer().apply(name) == expected

    def test_devowelize_is_case_sensitive(self):
        """Test that only lowercase vowels are removed"""
        assert devowelize("AEIOUaeiou") == "AEIOU"
        assert devowelize("Emilia") == "Eml"

    def test_length_and_add(self):
        assert length_of("Crstn") == ConsonantMethods.length_of("Crstn") == LengthMapper()("Crstn") == 5
        assert add(2, 3) == ConsonantMethods.accumulate(2, 3) == Accumulator()(2, 3) == 5

    def test_function_objects_implement_interfaces(self):
        assert isinstance(Devowelizer(), Function)
        assert isinstance(LengthMapper(), Function)
        assert isinstance(Accumulator(), BinaryOperator)

    def test_interfaces_are_abstract(self):
        with pytest.raises(TypeError):
            Function()
        with pytest.raises(TypeError):
            BinaryOperator()

    def test_wrapped_callables(self):
        assert Function.of(str.upper)("abc") == "ABC"
        assert BinaryOperator.of(max).apply(3, 8) == 8


class TestScenarios:
    """Every style must count the same consonants"""

    def test_all_styles_registered(self):
        assert len(SCENARIOS) == 9
        assert list(SCENARIOS)[0] == "how_many_consonants_procedural"

    @pytest.mark.parametrize("scenario", list(SCENARIOS))
    def test_demo_names(self, scenario, names):
        result = SCENARIOS[scenario](names)
        assert result == 20, f"{scenario}: expected 20, got {result}"

    @pytest.mark.parametrize("scenario", list(SCENARIOS))
    def test_single_name(self, scenario):
        assert SCENARIOS[scenario](["Sergio"]) == 3

    @pytest.mark.parametrize("scenario", [
        "how_many_consonants_procedural",
        "how_many_consonants_native",
    ])
    def test_seeded_styles_count_empty_as_zero(self, scenario):
        assert SCENARIOS[scenario]([]) == 0

    @pytest.mark.parametrize("scenario", [
        name for name in SCENARIOS
        if name not in ("how_many_consonants_procedural", "how_many_consonants_native")
    ])
    def test_pipeline_styles_fail_on_empty(self, scenario):
        """Test that unwrapping the empty reduction is reported as an error"""
        with pytest.raises(NoSuchElementError):
            SCENARIOS[scenario]([])
