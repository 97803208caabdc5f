"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error and finding messages are created here. NO f-strings in
    exception constructors! This keeps messages:
        - Testable
        - Consistently formatted
        - Documented in one place
    """

    # ------------------------------------------------------------------
    # Lookup and formatting
    # ------------------------------------------------------------------

    @staticmethod
    def text_not_found(key: str, locale: str) -> Diagnostic:
        """Key not present in the resolved resource table.

        Args:
            key: The resource key that was looked up
            locale: Locale of the searched table

        Returns:
            Diagnostic for TEXT_NOT_FOUND
        """
        return Diagnostic(
            code=DiagnosticCode.TEXT_NOT_FOUND,
            message=f"Text '{key}' not found in locale '{locale}'",
            hint="Check that the key is defined in every imported resource",
            locale=locale,
            key=key,
        )

    @staticmethod
    def format_arity_mismatch(template: str, expected: int, supplied: int) -> Diagnostic:
        """Fewer arguments supplied than the text references.

        Args:
            template: The text being rendered
            expected: Highest referenced argument slot plus one
            supplied: Number of arguments passed

        Returns:
            Diagnostic for FORMAT_ARITY_MISMATCH
        """
        return Diagnostic(
            code=DiagnosticCode.FORMAT_ARITY_MISMATCH,
            message=f"Text expects {expected} argument(s) but {supplied} were supplied",
            hint="Pass every argument up to the highest index the text references",
            text=template,
        )

    @staticmethod
    def format_argument_invalid(specifier: str, argument: object) -> Diagnostic:
        """Argument cannot be converted by the specifier verb.

        Args:
            specifier: The specifier text, e.g. "%d"
            argument: The offending argument

        Returns:
            Diagnostic for FORMAT_ARGUMENT_INVALID
        """
        type_name = type(argument).__name__
        return Diagnostic(
            code=DiagnosticCode.FORMAT_ARGUMENT_INVALID,
            message=f"Cannot format {type_name} value {argument!r} with '{specifier}'",
            hint="Integer verbs (d, i, u, x, X, o, b, c) need an int, float verbs need a number",
            text=specifier,
        )

    # ------------------------------------------------------------------
    # Import and registry
    # ------------------------------------------------------------------

    @staticmethod
    def import_failed(source_name: str, reason: str) -> Diagnostic:
        """Resource source could not be parsed.

        Args:
            source_name: Human-readable source name (file name or "<memory>")
            reason: Underlying parser error

        Returns:
            Diagnostic for IMPORT_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.IMPORT_FAILED,
            message=f"Failed to import resources from {source_name}: {reason}",
            hint="Check that the file is a well-formed Android strings.xml document",
        )

    @staticmethod
    def registry_not_configured() -> Diagnostic:
        """Locale resolution attempted on an empty registry.

        Returns:
            Diagnostic for REGISTRY_NOT_CONFIGURED
        """
        return Diagnostic(
            code=DiagnosticCode.REGISTRY_NOT_CONFIGURED,
            message="No resource table configured: import at least one locale before matching",
            hint="Import the default fallback language first",
        )

    # ------------------------------------------------------------------
    # Consistency findings
    # ------------------------------------------------------------------

    @staticmethod
    def missing_value(key: str, present_in: str, missing_in: str) -> Diagnostic:
        """Key present in one locale and absent in another.

        Returns:
            Diagnostic for MISSING_VALUE
        """
        return Diagnostic(
            code=DiagnosticCode.MISSING_VALUE,
            message=f"{missing_in} is missing '{key}' (defined in {present_in})",
            hint=f"Translate '{key}' for {missing_in}",
            locale=missing_in,
            key=key,
        )

    @staticmethod
    def type_mismatch(
        key: str, locale0: str, kind0: str, locale1: str, kind1: str
    ) -> Diagnostic:
        """Same key holds different value variants.

        Returns:
            Diagnostic for TYPE_MISMATCH
        """
        return Diagnostic(
            code=DiagnosticCode.TYPE_MISMATCH,
            message=f"'{key}' is a {kind0} in {locale0} but a {kind1} in {locale1}",
            hint="A key must use the same resource element in every locale",
            locale=locale1,
            key=key,
        )

    @staticmethod
    def specifier_count_mismatch(
        key: str, locale0: str, count0: int, locale1: str, count1: int
    ) -> Diagnostic:
        """Differing number of printf specifiers.

        Returns:
            Diagnostic for FORMAT_SPECIFIER_COUNT_MISMATCH
        """
        return Diagnostic(
            code=DiagnosticCode.FORMAT_SPECIFIER_COUNT_MISMATCH,
            message=(
                f"printf argument count mismatch: {locale0}.{key} has {count0} arguments "
                f"but {locale1}.{key} has {count1}"
            ),
            hint="Every translation must consume the same arguments",
            locale=locale1,
            key=key,
        )

    @staticmethod
    def unexpected_specifier_count(
        key: str, locale: str, found: int, expected: int, text: str
    ) -> Diagnostic:
        """Text carries a different number of specifiers than required.

        Returns:
            Diagnostic for UNEXPECTED_SPECIFIER_COUNT
        """
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_SPECIFIER_COUNT,
            message=(
                f"The value {locale}.{key} has {found} format specifiers "
                f"but expected are {expected}"
            ),
            hint="String array items are not interpolated; use %% for a literal percent sign",
            locale=locale,
            key=key,
            text=text,
        )

    @staticmethod
    def verb_conflict(
        key: str, index: int, locale0: str, verb0: str, locale1: str, verb1: str
    ) -> Diagnostic:
        """Same canonical argument uses different conversion verbs.

        Returns:
            Diagnostic for VERB_CONFLICT
        """
        return Diagnostic(
            code=DiagnosticCode.VERB_CONFLICT,
            message=(
                f"The value {locale0}.{key} has at index {index} the verb '{verb0}' "
                f"but {locale1}.{key} has the verb '{verb1}'"
            ),
            hint="Reorder arguments with explicit indices instead of changing verbs",
            locale=locale1,
            key=key,
        )

    @staticmethod
    def array_count_mismatch(
        key: str, locale0: str, count0: int, locale1: str, count1: int
    ) -> Diagnostic:
        """String arrays differ in element count.

        Returns:
            Diagnostic for ARRAY_COUNT_MISMATCH
        """
        return Diagnostic(
            code=DiagnosticCode.ARRAY_COUNT_MISMATCH,
            message=(
                f"The array count in {locale0}.{key} is {count0} "
                f"but {locale1}.{key} has {count1}"
            ),
            hint="String arrays must have the same number of items in every locale",
            locale=locale1,
            key=key,
        )

    @staticmethod
    def other_missing(key: str, locale: str) -> Diagnostic:
        """Plural without the mandatory 'other' form.

        Returns:
            Diagnostic for OTHER_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.OTHER_MISSING,
            message=f"the plural 'other' must not be empty of {locale}.{key}",
            hint="'other' is the fallback for every unpopulated plural category",
            locale=locale,
            key=key,
        )

    @staticmethod
    def consistency_failed(finding_count: int, locale_count: int) -> Diagnostic:
        """Validation over all tables produced findings.

        Returns:
            Diagnostic for CONSISTENCY_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.CONSISTENCY_FAILED,
            message=(
                f"Resource validation failed with {finding_count} finding(s) "
                f"across {locale_count} locale(s)"
            ),
            hint="Inspect ConsistencyError.result for every finding",
        )
