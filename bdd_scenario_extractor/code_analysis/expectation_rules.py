"""Rule cascade turning expectation calls into "Entonces" sentences."""

from collections.abc import Sequence

from bdd_scenario_extractor.code_analysis.rules import DescriptionRule

GENERIC_EXPECTATION = "se verifica el resultado esperado"
GENERIC_RESULT = "el resultado debe ser correcto"
# Emitted by a bare toBe() without a literal to compare against.
UNSPECIFIED_RESULT = "se debe verificar el resultado esperado"

# Keywords of the documentation tooling itself; their assertions are noise.
TOOLING_KEYWORDS = ("generator", "extractor", "formatter")


def _quoted(prefix: str, default: str):
    def render(arguments: Sequence[str]) -> str:
        value = arguments[0] if arguments and arguments[0] else default
        return f'{prefix}"{value}"'

    return render


def _to_be(arguments: Sequence[str]) -> str:
    if arguments and arguments[0]:
        return f'el valor debe ser: "{arguments[0]}"'
    return UNSPECIFIED_RESULT


EXPECTATION_RULES: tuple[DescriptionRule, ...] = (
    DescriptionRule(
        name="suppress-tooling",
        all_of=("expect",),
        any_of=TOOLING_KEYWORDS,
        template="",
    ),
    # Negated Playwright matchers
    DescriptionRule(
        name="not-visible",
        all_of=(".not.", "tobevisible"),
        template="el elemento no debe estar visible",
    ),
    DescriptionRule(
        name="not-hidden",
        all_of=(".not.", "tobehidden"),
        template="el elemento no debe estar oculto",
    ),
    DescriptionRule(
        name="not-disabled",
        all_of=(".not.", "tobedisabled"),
        template="el elemento no debe estar deshabilitado",
    ),
    DescriptionRule(
        name="not-enabled",
        all_of=(".not.", "tobeenabled"),
        template="el elemento no debe estar habilitado",
    ),
    DescriptionRule(
        name="not-focused",
        all_of=(".not.", "tobefocused"),
        template="el elemento no debe tener el foco",
    ),
    DescriptionRule(
        name="not-has-text",
        all_of=(".not.", "tohavetext"),
        template=_quoted("no debe mostrar el texto: ", "texto esperado"),
    ),
    DescriptionRule(
        name="not",
        all_of=(".not.",),
        template=GENERIC_EXPECTATION,
    ),
    # Phone field messages
    DescriptionRule(
        name="phone-error-text",
        all_of=("expectcredentialsphoneerrormessagetohavetext",),
        template=_quoted("se muestra el mensaje de error: ", "mensaje de error"),
    ),
    DescriptionRule(
        name="phone-error-visible",
        all_of=("expectcredentialsphoneerrormessagevisible",),
        template="se muestra un mensaje de error en el campo número de celular",
    ),
    DescriptionRule(
        name="phone-min-length-visible",
        all_of=("expectcredentialsphoneminlengthmessagevisible",),
        template="se muestra el mensaje de longitud mínima",
    ),
    DescriptionRule(
        name="phone-min-length-text",
        all_of=("expectcredentialsphoneminlengthmessagetohavetext",),
        template=_quoted("se muestra el mensaje: ", "mensaje de longitud"),
    ),
    DescriptionRule(
        name="phone-required-visible",
        all_of=("expectcredentialsphonerequiredmessagevisible",),
        template="se muestra el mensaje de campo requerido",
    ),
    DescriptionRule(
        name="phone-required-text",
        all_of=("expectcredentialsphonerequiredmessagetohavetext",),
        template=_quoted("se muestra el mensaje: ", "campo requerido"),
    ),
    DescriptionRule(
        name="phone-focused",
        all_of=("expectcredentialsphonefocused",),
        template="el campo número de celular debe tener el foco",
    ),
    # Buttons
    DescriptionRule(
        name="sign-in-disabled",
        all_of=("expectcredentialssigninbuttondisabled",),
        template="el botón de iniciar sesión debe estar deshabilitado",
    ),
    DescriptionRule(
        name="sign-in-enabled",
        all_of=("expectcredentialssigninbuttonenabled",),
        template="el botón de iniciar sesión debe estar habilitado",
    ),
    DescriptionRule(
        name="register-enabled",
        all_of=("expectalternativeaccessregisterbuttonenabled",),
        template="el botón de registrarse debe estar habilitado",
    ),
    DescriptionRule(
        name="guest-enabled",
        all_of=("expectalternativeaccessguestbuttonenabled",),
        template="el botón de ingresar como invitado debe estar habilitado",
    ),
    # Change phone popup
    DescriptionRule(
        name="popup-heading-visible",
        all_of=("expectchangephonepopupheadingvisible",),
        template="se muestra el encabezado del popup de ayuda",
    ),
    DescriptionRule(
        name="popup-message-visible",
        all_of=("expectchangephonepopupmessagevisible",),
        template="se muestra el mensaje del popup de ayuda",
    ),
    DescriptionRule(
        name="popup-button-visible",
        all_of=("expectchangephonepopupbuttonvisible",),
        template="se muestra el botón del popup de ayuda",
    ),
    DescriptionRule(
        name="popup-heading-text",
        all_of=("expectchangephonepopupheadingtohavetext",),
        template=_quoted("el popup muestra el título: ", "título del popup"),
    ),
    # Calendar
    DescriptionRule(
        name="calendar-visible",
        all_of=("expectcalendarvisible",),
        template="el calendario debe estar visible",
    ),
    DescriptionRule(
        name="calendar-hidden",
        all_of=("expectcalendarhidden",),
        template="el calendario debe estar oculto",
    ),
    DescriptionRule(
        name="date-selected",
        all_of=("expectdateselected",),
        template="la fecha debe estar seleccionada correctamente",
    ),
    # Date of birth validations
    DescriptionRule(
        name="validate-enabled-days",
        all_of=("validateenableddays",),
        template="se validan los días habilitados para mayor de edad",
    ),
    DescriptionRule(
        name="validate-month-restrictions",
        all_of=("validatemonthrestrictions",),
        template="se validan las restricciones de navegación entre meses",
    ),
    DescriptionRule(
        name="validate-valid-date",
        all_of=("validatevaliddateselection",),
        template="se valida que la fecha seleccionada cumple con mayoría de edad",
    ),
    DescriptionRule(
        name="validate-invalid-date",
        all_of=("validateinvaliddaterestriction",),
        template="se valida que no se puede seleccionar fecha de menor de edad",
    ),
    # Generic element states
    DescriptionRule(
        name="visible",
        any_of=("expectvisible", "tobevisible"),
        template="el elemento debe estar visible",
    ),
    DescriptionRule(
        name="hidden",
        any_of=("expecthidden", "tobehidden"),
        template="el elemento debe estar oculto",
    ),
    DescriptionRule(
        name="disabled",
        any_of=("expectdisabled", "tobedisabled"),
        template="el elemento debe estar deshabilitado",
    ),
    DescriptionRule(
        name="enabled",
        any_of=("expectenabled", "tobeenabled"),
        template="el elemento debe estar habilitado",
    ),
    DescriptionRule(
        name="focused",
        any_of=("expectfocused", "tobefocused"),
        template="el elemento debe tener el foco",
    ),
    DescriptionRule(
        name="has-text",
        all_of=("tohavetext",),
        template=_quoted("debe mostrar el texto: ", "texto esperado"),
    ),
    # Playwright matchers
    DescriptionRule(
        name="resolves",
        all_of=("resolves.tobe",),
        template="la promesa debe resolverse con el valor esperado",
    ),
    DescriptionRule(
        name="to-be-defined",
        all_of=("tobedefined",),
        template="el elemento debe estar definido",
    ),
    DescriptionRule(
        name="to-be",
        all_of=("tobe",),
        template=_to_be,
    ),
    DescriptionRule(
        name="expect",
        all_of=("expect",),
        template=GENERIC_EXPECTATION,
    ),
)
