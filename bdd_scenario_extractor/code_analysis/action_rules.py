"""Rule cascade turning action calls into "Cuando" sentences.

Ordered by priority: setup helpers, navigation, field fills, value getters,
clicks and selections, page section checks, console messages, calendar
operations, date validation helpers and generic verbs. Anything left over is
handled by the word-based fallback in the synthesizer.
"""

from collections.abc import Sequence
from types import MappingProxyType

from bdd_scenario_extractor.code_analysis.rules import (
    DescriptionRule,
    first_argument,
)

# Exact method names (prefixes stripped) used by the calendar helpers.
CALENDAR_METHODS = MappingProxyType(
    {
        "openDatePicker": "el usuario abre el calendario",
        "closeDatePicker": "el usuario cierra el calendario",
        "clickDate": "el usuario selecciona una fecha",
        "clickNextMonth": "el usuario navega al mes siguiente",
        "clickPrevMonth": "el usuario navega al mes anterior",
        "clickPreviousMonth": "el usuario navega al mes anterior",
        "clickCurrentDateHeader": "el usuario hace clic en el encabezado de fecha actual",
        "clearDate": "el usuario limpia la fecha seleccionada",
    }
)

# Lower-cased helper names from the date-of-birth rules.
DATE_VALIDATIONS = MappingProxyType(
    {
        "validateenableddays": "se verifican los días habilitados para mayor de edad",
        "validatemonthrestrictions": "se verifica que no se puede navegar a meses restringidos",
        "validatevaliddateselection": "se verifica que se puede seleccionar una fecha válida",
        "validateinvaliddaterestriction": "se verifica que no se puede seleccionar una fecha inválida",
        "validateinvalidfecharestriction": "se verifica que no se puede seleccionar una fecha inválida",
    }
)

# Prefixes removed before the word-based fallback.
NAMESPACE_PREFIXES = (
    "homePage.",
    "loginPage.",
    "registerPage.",
    "page.",
    "CommonTestSteps.",
    "DateHelper.",
)

# Exact common method names checked by the fallback, without the subject.
COMMON_METHODS = MappingProxyType(
    {
        "openDatePicker": "abre el calendario",
        "validateEnabledDays": "se verifican los días habilitados para mayor de edad",
        "validateMonthRestrictions": "se verifica que no se puede navegar a meses restringidos",
        "validateValidDateSelection": "se verifica que se puede seleccionar una fecha válida",
        "validateInvalidDateRestriction": "se verifica que no se puede seleccionar una fecha inválida",
        "expectCalendarVisible": "verifica que el calendario está visible",
        "expectCalendarHidden": "verifica que el calendario está oculto",
        "clickDate": "selecciona una fecha",
        "clickNextMonth": "navega al mes siguiente",
        "clickPrevMonth": "navega al mes anterior",
        "clickCurrentDateHeader": "hace clic en el encabezado de fecha actual",
        "clearDate": "limpia la fecha seleccionada",
        "selectDate": "selecciona una fecha",
    }
)

# Technical words translated by the fallback.
WORD_TRANSLATIONS = MappingProxyType(
    {
        "get": "obtiene",
        "set": "establece",
        "check": "verifica",
        "verify": "verifica",
        "validate": "valida",
        "ensure": "asegura",
        "test": "prueba",
        "assert": "confirma",
        "expect": "verifica que",
        "click": "hace clic en",
        "fill": "completa",
        "type": "escribe en",
        "select": "selecciona",
        "choose": "elige",
        "toggle": "alterna",
        "enable": "habilita",
        "disable": "deshabilita",
        "show": "muestra",
        "hide": "oculta",
        "open": "abre",
        "close": "cierra",
        "submit": "envía",
        "cancel": "cancela",
        "confirm": "confirma",
        "accept": "acepta",
        "reject": "rechaza",
        "date": "fecha",
        "picker": "selector",
        "calendar": "calendario",
        "enabled": "habilitados",
        "disabled": "deshabilitados",
        "days": "días",
        "months": "meses",
        "years": "años",
    }
)


def strip_namespace(qualified_name: str) -> str:
    """Remove one known page-object or helper prefix."""
    for prefix in NAMESPACE_PREFIXES:
        if qualified_name.startswith(prefix):
            return qualified_name[len(prefix) :]
    return qualified_name


def _fill_phone(arguments: Sequence[str]) -> str:
    value = first_argument(arguments)
    if not value:
        return "el usuario borra la entrada del campo número de celular"
    return f'el usuario ingresa "{value}" en el campo número de celular'


def _fill_field(field: str):
    def render(arguments: Sequence[str]) -> str:
        return f'el usuario ingresa "{first_argument(arguments)}" en el campo {field}'

    return render


def _click_target(arguments: Sequence[str]) -> str:
    return f"el usuario hace clic en {first_argument(arguments, 'el elemento')}"


def _console_message(emoji: str):
    def when(arguments: Sequence[str]) -> bool:
        return emoji in first_argument(arguments)

    return when


def _calendar_method_rules() -> tuple[DescriptionRule, ...]:
    return tuple(
        DescriptionRule(
            name=f"calendar-{method}",
            any_of=(method.lower(),),
            template=sentence,
        )
        for method, sentence in CALENDAR_METHODS.items()
    )


def _date_validation_rules() -> tuple[DescriptionRule, ...]:
    return tuple(
        DescriptionRule(name=f"date-{helper}", any_of=(helper,), template=sentence)
        for helper, sentence in DATE_VALIDATIONS.items()
    )


ACTION_RULES: tuple[DescriptionRule, ...] = (
    # Setup helpers
    DescriptionRule(
        name="setup-rules-register",
        any_of=("setuprulestest", "setupregisterrulestest"),
        all_of=("register",),
        template="el usuario se encuentra en la página de registro",
    ),
    DescriptionRule(
        name="setup-rules-login",
        any_of=("setuprulestest", "setupregisterrulestest"),
        template="el usuario se encuentra en la página de login",
    ),
    DescriptionRule(
        name="setup-validation-register",
        any_of=("setupvalidationtest", "setupregistervalidationtest"),
        all_of=("register",),
        template="el usuario se encuentra en la página de registro",
    ),
    DescriptionRule(
        name="setup-validation",
        any_of=("setupvalidationtest", "setupregistervalidationtest"),
        template="el usuario se encuentra en la página",
    ),
    # Documentation tooling used by the demo suite
    DescriptionRule(
        name="documentation-config",
        all_of=("documentationconfig.createdefault",),
        template="el usuario configura el generador de documentación",
    ),
    DescriptionRule(
        name="extractor-can-process",
        all_of=("extractor.canprocess",),
        template="el usuario verifica que se pueden procesar archivos de test",
    ),
    DescriptionRule(
        name="formatter-extension",
        all_of=("formatter.getfileextension",),
        template="el usuario verifica el formato de salida de documentación",
    ),
    # Navigation
    DescriptionRule(
        name="navigate-home",
        any_of=("goto", "navigate"),
        all_of=("home",),
        template="el usuario navega a la página de inicio",
    ),
    DescriptionRule(
        name="navigate-login",
        any_of=("goto", "navigate"),
        all_of=("login",),
        template="el usuario navega a la página de login",
    ),
    DescriptionRule(
        name="navigate-register",
        any_of=("goto", "navigate"),
        all_of=("register",),
        template="el usuario navega a la página de registro",
    ),
    DescriptionRule(
        name="navigate",
        any_of=("goto", "navigate"),
        template="el usuario navega a la página correspondiente",
    ),
    # Field fills
    DescriptionRule(
        name="fill-credentials-phone",
        all_of=("fillcredentialsphone",),
        template=_fill_phone,
    ),
    DescriptionRule(
        name="fill-phone",
        all_of=("fill", "phone"),
        template=_fill_field("número de celular"),
    ),
    DescriptionRule(
        name="fill-email",
        all_of=("fill", "email"),
        template=_fill_field("de email"),
    ),
    DescriptionRule(
        name="fill-password",
        all_of=("fill", "password"),
        template=_fill_field("de contraseña"),
    ),
    DescriptionRule(
        name="fill-name",
        all_of=("fill", "name"),
        template=_fill_field("de nombre"),
    ),
    DescriptionRule(
        name="fill",
        all_of=("fill",),
        template=lambda arguments: (
            f'el usuario completa el campo con "{first_argument(arguments)}"'
        ),
    ),
    # Value getters
    DescriptionRule(
        name="get-phone-value",
        all_of=("getcredentialsphonevalue",),
        template="el usuario verifica el valor del campo número de celular",
    ),
    DescriptionRule(
        name="get-value-phone",
        all_of=("get", "value", "phone"),
        template="el usuario verifica el valor del campo número de celular",
    ),
    DescriptionRule(
        name="get-value",
        all_of=("get", "value"),
        template="el usuario verifica el valor del campo",
    ),
    # Named date picker helpers; must precede the generic clicks
    *_calendar_method_rules(),
    # Clicks and selections
    DescriptionRule(
        name="click-button",
        all_of=("click", "button"),
        template="el usuario hace clic en el botón",
    ),
    DescriptionRule(
        name="click-calendar",
        all_of=("click", "calendar"),
        template="el usuario hace clic en el calendario",
    ),
    DescriptionRule(
        name="click-date",
        all_of=("click", "date"),
        template="el usuario selecciona una fecha",
    ),
    DescriptionRule(
        name="click",
        all_of=("click",),
        template=_click_target,
    ),
    DescriptionRule(
        name="select-date",
        all_of=("select", "date"),
        template=lambda arguments: (
            f'el usuario selecciona la fecha "{first_argument(arguments)}"'
        ),
    ),
    DescriptionRule(
        name="select",
        all_of=("select",),
        template=lambda arguments: f'el usuario selecciona "{first_argument(arguments)}"',
    ),
    # Page sections
    DescriptionRule(
        name="validate-login-elements",
        all_of=("validateloginpageelements",),
        template="el usuario verifica que todos los elementos de login están presentes",
    ),
    DescriptionRule(
        name="validate-register-elements",
        all_of=("validateregisterpageelements",),
        template="el usuario verifica que todos los elementos de registro están presentes",
    ),
    DescriptionRule(
        name="validate-elements",
        all_of=("validate", "elements"),
        template="el usuario verifica que todos los elementos están presentes",
    ),
    DescriptionRule(
        name="verify-menu",
        all_of=("verifymenu",),
        template="el usuario verifica los elementos del menú",
    ),
    DescriptionRule(
        name="verify-carousel",
        all_of=("verifycarousel",),
        template="el usuario verifica los elementos del carrusel",
    ),
    DescriptionRule(
        name="verify-expert",
        all_of=("verifyexpert",),
        template="el usuario verifica la sección de expertos",
    ),
    DescriptionRule(
        name="verify-benefits",
        all_of=("verifybenefits",),
        template="el usuario verifica la sección de beneficios",
    ),
    DescriptionRule(
        name="verify-courses",
        all_of=("verifycourses",),
        template="el usuario verifica la sección de cursos",
    ),
    DescriptionRule(
        name="verify-news",
        all_of=("verifynews",),
        template="el usuario verifica la sección de noticias",
    ),
    DescriptionRule(
        name="verify-prefooter",
        all_of=("verifyprefooter",),
        template="el usuario verifica la sección antes del pie de página",
    ),
    DescriptionRule(
        name="verify-footer",
        all_of=("verifyfooter",),
        template="el usuario verifica el pie de página",
    ),
    DescriptionRule(
        name="verify",
        all_of=("verify",),
        template="el usuario verifica los elementos correspondientes",
    ),
    # Console messages
    DescriptionRule(
        name="console-ready",
        all_of=("console.log",),
        when=_console_message("✅"),
        template="el sistema confirma que está listo para usar",
    ),
    DescriptionRule(
        name="console-tip",
        all_of=("console.log",),
        when=_console_message("💡"),
        template="el sistema muestra información sobre cómo generar documentación",
    ),
    DescriptionRule(
        name="console",
        all_of=("console.log",),
        template="el sistema muestra un mensaje informativo",
    ),
    # Calendar
    DescriptionRule(
        name="open-date-picker",
        any_of=("opendatepicker", "opendate"),
        template="el usuario abre el calendario",
    ),
    DescriptionRule(
        name="close-date-picker",
        all_of=("close", "datepicker"),
        template="el usuario cierra el calendario",
    ),
    DescriptionRule(
        name="calendar-open",
        all_of=("calendar",),
        any_of=("open", "show"),
        template="el usuario abre el calendario",
    ),
    DescriptionRule(
        name="calendar-close",
        all_of=("calendar", "close"),
        template="el usuario cierra el calendario",
    ),
    DescriptionRule(
        name="calendar-navigate",
        all_of=("calendar", "navigate"),
        template="el usuario navega en el calendario",
    ),
    DescriptionRule(
        name="calendar",
        all_of=("calendar",),
        template="el usuario interactúa con el calendario",
    ),
    # Date of birth validations
    DescriptionRule(
        name="validate-enabled-days",
        all_of=("validate", "enabled", "days"),
        template=DATE_VALIDATIONS["validateenableddays"],
    ),
    *_date_validation_rules(),
    # Generic verbs
    DescriptionRule(name="create", all_of=("create",), template="el usuario crea un elemento"),
    DescriptionRule(name="open", all_of=("open",), template="el usuario abre un elemento"),
    DescriptionRule(name="close", all_of=("close",), template="el usuario cierra un elemento"),
    DescriptionRule(name="clear", all_of=("clear",), template="el usuario limpia el campo"),
    DescriptionRule(
        name="press",
        all_of=("press",),
        template=lambda arguments: (
            f"el usuario presiona la tecla {first_argument(arguments)}".rstrip()
        ),
    ),
    DescriptionRule(
        name="wait",
        all_of=("wait",),
        template="el usuario espera a que se complete la acción",
    ),
)
