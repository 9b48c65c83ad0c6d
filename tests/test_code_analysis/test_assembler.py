"""Tests for scenario assembly."""

import pytest

from bdd_scenario_extractor.code_analysis.assembler import (
    DEFAULT_GIVEN,
    DEFAULT_WHEN,
    UNNAMED_TEST,
    assemble,
    derive_feature_name,
    derive_test_type,
)
from bdd_scenario_extractor.code_analysis.call_classifier import classify_call
from bdd_scenario_extractor.code_analysis.models import (
    CallKind,
    CallSite,
    StringLiteral,
    TestCase,
)


def classified(name, *arguments, receiver_text=""):
    return classify_call(
        CallSite(
            qualified_name=name,
            arguments=tuple(StringLiteral(a) for a in arguments),
            line_number=1,
            receiver_text=receiver_text,
        )
    )


class TestAssemble:
    def given_test_case(self, title, *calls):
        self.test_case = TestCase(
            title=title,
            line_number=7,
            actions=tuple(c for c in calls if c.kind is CallKind.ACTION),
            expectations=tuple(c for c in calls if c.kind is CallKind.EXPECTATION),
        )

    def when_assembled(self, file_path="tests/rules/login-rules.spec.ts"):
        self.scenario = assemble(self.test_case, file_path)

    def then_steps_are(self, given=None, when=None, then=None):
        if given is not None:
            assert list(self.scenario.given) == given
        if when is not None:
            assert list(self.scenario.when) == when
        if then is not None:
            assert list(self.scenario.then) == then

    def test_precondition_becomes_given(self):
        """The first setup/navigate action is the Given; the rest are When steps."""
        self.given_test_case(
            "Ingresar número",
            classified("CommonTestSteps.setupRulesTest", "page"),
            classified("loginPage.fillCredentialsPhone", "987654321"),
            classified("loginPage.expectCredentialsSignInButtonEnabled"),
        )
        self.when_assembled()
        self.then_steps_are(
            given=["el usuario se encuentra en la página de login"],
            when=['el usuario ingresa "987654321" en el campo número de celular'],
            then=["el botón de iniciar sesión debe estar habilitado"],
        )
        assert not self.scenario.has_generated_steps()

    def test_defaults_when_no_calls(self):
        """A test with no calls still gets all three buckets."""
        self.given_test_case("Sin pistas")
        self.when_assembled()
        self.then_steps_are(given=[DEFAULT_GIVEN], when=[DEFAULT_WHEN])
        assert len(self.scenario.then) == 1
        assert self.scenario.has_generated_steps()

    def test_contextual_then_when_no_expectations(self):
        """Without expectations the Then step comes from the title."""
        self.given_test_case(
            "Verificar que el botón de iniciar sesión esté deshabilitado al abrir la página",
            classified("CommonTestSteps.setupRulesTest", "page"),
        )
        self.when_assembled()
        self.then_steps_are(then=["el botón de iniciar sesión debe estar deshabilitado"])

    def test_suppressed_expectation_falls_back_to_context(self):
        """Tooling assertions leave no blank Then step."""
        self.given_test_case(
            "Demostrar generación de documentación",
            classified("expect().toBeDefined", receiver_text="(generator)"),
        )
        self.when_assembled()
        self.then_steps_are(
            then=["el generador de documentación debe estar configurado correctamente"]
        )

    def test_unspecified_result_gets_contextual_step_first(self):
        """A bare toBe() is preceded by the title's expected outcome."""
        self.given_test_case(
            "Verificar que el campo número de celular tenga el foco",
            classified("expect().toBe", receiver_text="(focused)"),
        )
        self.when_assembled()
        self.then_steps_are(
            then=[
                "el campo número de celular debe tener el foco",
                "se debe verificar el resultado esperado",
            ]
        )

    def test_blank_title_is_named(self):
        self.given_test_case("   ")
        self.when_assembled()
        assert self.scenario.scenario_name == UNNAMED_TEST
        assert self.scenario.is_complete()

    def test_carries_location_and_metadata(self):
        self.given_test_case("Ubicación")
        self.when_assembled()
        assert self.scenario.line_number == 7
        assert self.scenario.file_path == "tests/rules/login-rules.spec.ts"
        assert self.scenario.test_type == "rules"
        assert self.scenario.feature == "Funcionalidad de Login"
        assert self.scenario.metadata["generated_from_code"] is True
        assert not self.scenario.has_explicit_bdd()


class TestDerivations:
    @pytest.mark.parametrize(
        "file_path,expected",
        [
            ("tests/rules/login-rules.spec.ts", "rules"),
            ("tests/e2e/x.spec.ts", "e2e"),
            ("tests/validation/home-validation.spec.ts", "validation"),
            ("tests\\rules\\register-rules.spec.ts", "rules"),
            ("tests/other/x.spec.ts", "validation"),
        ],
    )
    def test_test_type_from_path(self, file_path, expected):
        assert derive_test_type(file_path) == expected

    @pytest.mark.parametrize(
        "file_path,expected",
        [
            ("tests/rules/login-rules.spec.ts", "Funcionalidad de Login"),
            ("tests/rules/register-rules.spec.ts", "Funcionalidad de Registro"),
            ("tests/validation/home-validation.spec.ts", "Página de Inicio"),
            ("tests/e2e/checkout-flow.spec.ts", "Funcionalidad de Checkout"),
        ],
    )
    def test_feature_name_from_file_name(self, file_path, expected):
        assert derive_feature_name(file_path) == expected
