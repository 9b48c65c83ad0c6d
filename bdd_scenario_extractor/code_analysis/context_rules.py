"""Title cascade used when a test yields no expectation sentence.

Keywords are matched against the lower-cased Spanish test title.
"""

from bdd_scenario_extractor.code_analysis.rules import ContextRule

VALIDATIONS_RUN = "las validaciones deben ejecutarse correctamente"
GENERIC_BEHAVIOUR = "el comportamiento del sistema debe ser el correcto"

CONTEXT_RULES: tuple[ContextRule, ...] = (
    ContextRule(
        name="documentation-demo",
        all_of=("demostrar generación de documentación",),
        sentence="el generador de documentación debe estar configurado correctamente",
    ),
    ContextRule(
        name="letters-in-number-field",
        all_of=("letras en el campo de número", "ignoren"),
        sentence="las letras deben ser ignoradas y el campo debe permanecer vacío",
    ),
    ContextRule(
        name="phone-with-letters",
        all_of=("número de celular que contenga letras", "ignoradas"),
        sentence="las letras deben ser ignoradas y solo deben mantenerse los números",
    ),
    ContextRule(
        name="focus",
        all_of=("foco",),
        sentence="el campo número de celular debe tener el foco",
    ),
    ContextRule(
        name="button-disabled",
        all_of=("deshabilitado", "botón"),
        sentence="el botón correspondiente debe estar deshabilitado",
        refinements=(
            ContextRule(
                name="sign-in",
                all_of=("iniciar sesión",),
                sentence="el botón de iniciar sesión debe estar deshabilitado",
            ),
        ),
    ),
    ContextRule(
        name="button-enabled",
        all_of=("habilitado", "botón"),
        sentence="el botón correspondiente debe estar habilitado",
        refinements=(
            ContextRule(
                name="sign-in",
                all_of=("iniciar sesión",),
                sentence="el botón de iniciar sesión debe estar habilitado",
            ),
            ContextRule(
                name="register",
                all_of=("registrarse",),
                sentence="el botón de registrarse debe estar habilitado",
            ),
            ContextRule(
                name="guest",
                all_of=("invitado",),
                sentence="el botón de ingresar como invitado debe estar habilitado",
            ),
        ),
    ),
    ContextRule(
        name="error-message",
        any_of=("mensaje de error", "muestre un mensaje"),
        sentence="se debe mostrar el mensaje de error correspondiente",
        refinements=(
            ContextRule(
                name="length",
                all_of=("longitud",),
                sentence="se debe mostrar un mensaje de error sobre la longitud mínima",
            ),
            ContextRule(
                name="format",
                all_of=("formato",),
                sentence="se debe mostrar un mensaje de error sobre el formato",
            ),
        ),
    ),
    ContextRule(
        name="ignored-characters",
        any_of=("ignoren", "ignoradas"),
        sentence="los caracteres no válidos deben ser ignorados",
        refinements=(
            ContextRule(
                name="letters",
                all_of=("letras",),
                sentence="las letras deben ser ignoradas y no aparecer en el campo",
            ),
            ContextRule(
                name="special-characters",
                all_of=("caracteres especiales",),
                sentence="los caracteres especiales deben ser ignorados",
            ),
        ),
    ),
    # No sentence of its own: unmatched calendar titles keep falling through.
    ContextRule(
        name="calendar",
        all_of=("calendario",),
        sentence=None,
        refinements=(
            ContextRule(
                name="default-month",
                all_of=("muestre", "defecto"),
                sentence=(
                    "el calendario debe mostrar el año y mes correcto "
                    "para usuarios de mayoría de edad"
                ),
            ),
            ContextRule(
                name="future-months",
                all_of=("navegar", "meses futuros"),
                sentence="no se debe permitir navegar a meses que resultarían en menor de edad",
            ),
            ContextRule(
                name="arrows",
                all_of=("navegar", "flechas"),
                sentence="se debe poder navegar entre meses usando las flechas de navegación",
            ),
            ContextRule(
                name="close-without-selection",
                all_of=("cerrar", "sin seleccionar"),
                sentence="el calendario debe cerrarse correctamente sin seleccionar fecha",
            ),
        ),
    ),
    ContextRule(
        name="date-selection",
        all_of=("seleccionar", "fecha"),
        sentence="la selección de fecha debe funcionar correctamente",
        refinements=(
            ContextRule(
                name="adult",
                all_of=("válida", "más de 18"),
                sentence="se debe poder seleccionar una fecha que haga al usuario mayor de edad",
            ),
            ContextRule(
                name="minor",
                all_of=("no se puede", "17 años"),
                sentence="no se debe permitir seleccionar fechas que resulten en menor de edad",
            ),
        ),
    ),
    ContextRule(
        name="help-popup",
        any_of=("popup", "ayuda"),
        sentence="se debe mostrar el popup de ayuda con la información correcta",
    ),
    ContextRule(
        name="element-presence",
        any_of=("presencia", "elementos"),
        sentence="todos los elementos de la página deben estar presentes y visibles",
    ),
)
