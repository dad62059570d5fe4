#!/usr/bin/env python3

"""Debug-info reconstruction orchestrator (Application Layer).

Runs the phases of a reconstruction in order:
1. Diagnostics gate: front-end errors stop the run
2. Struct layouts, so every later type can reference a struct by name
3. Function prototypes, registered with the writer
4. Function symbols, resolved through the signature table
5. Global variable types and global symbols
6. Per-symbol warnings, reported once every symbol has been tried

Structural errors from phases 2-5 abort the run. Symbol resolution failures
only produce warnings.
"""

from dataclasses import dataclass, field, replace

from ..domain.errors import SourceParseError, SymbolResolutionError
from ..domain.models.source import (
    DeclarationKind,
    DiagnosticSeverity,
    SourceUnit,
)
from ..domain.models.symbols import ResolvedSymbol, SymbolConfiguration, SymbolSpec
from ..domain.models.types import StructLayout, TypeNode
from ..domain.services.mapping import SymbolFinder
from ..domain.services.translation import StructLayoutBuilder, TypeTranslator
from ..infrastructure.binary_image import BinaryImage, BinaryImageLoader
from ..infrastructure.clang_frontend import ClangFrontend
from ..infrastructure.config import Config, load_symbol_configuration
from ..infrastructure.debug_info_writer import JsonDebugInfoWriter
from ..infrastructure.logging import ProgressTracker, get_logger, log_timing

logger = get_logger(__name__)


@dataclass
class ReconstructionReport:
    """Everything a run handed to the writer, plus its warnings."""

    structs: list[StructLayout] = field(default_factory=list)
    function_types: dict[str, int] = field(default_factory=dict)
    functions: list[ResolvedSymbol] = field(default_factory=list)
    globals: list[ResolvedSymbol] = field(default_factory=list)
    warnings: list[SymbolResolutionError] = field(default_factory=list)


class DebugInfoReconstructor:
    """Combines a parsed C source and a binary image into debug-info records.

    Attributes:
        image: Loaded binary, read-only
        source_unit: Parsed C source
        writer: Debug-info writer receiving the records
    """

    def __init__(
        self, image: BinaryImage, source_unit: SourceUnit, writer: JsonDebugInfoWriter
    ):
        self.image = image
        self.source_unit = source_unit
        self.writer = writer
        self.translator = TypeTranslator()
        self.struct_builder = StructLayoutBuilder(self.translator)
        self.finder = SymbolFinder(image.data, image.image_base, image.sections)
        self.tracker = ProgressTracker(logger)

    def check_diagnostics(self) -> None:
        """Log front-end diagnostics; stop on anything at error level or above.

        Raises:
            SourceParseError: The source produced error or fatal diagnostics
        """
        errors = []
        for diagnostic in self.source_unit.diagnostics:
            if diagnostic.severity >= DiagnosticSeverity.ERROR:
                logger.error(str(diagnostic))
                errors.append(diagnostic)
            else:
                logger.warning(str(diagnostic))

        if errors:
            logger.info("Please fix these errors before continuing!")
            raise SourceParseError(f"{len(errors)} error(s) in source, first: {errors[0]}")

    def register_structs(self) -> list[StructLayout]:
        layouts = []
        for declaration in self.source_unit.declarations(DeclarationKind.STRUCT):
            layout = self.struct_builder.build(declaration)
            self.writer.insert_struct(layout)
            layouts.append(layout)
        self.tracker.count_structs(len(layouts))
        logger.info(f"Parsed {len(layouts)} struct definitions.")
        return layouts

    def register_function_types(self) -> dict[str, int]:
        """Register every function prototype, including ones without a signature.

        Returns:
            Function name -> writer type index
        """
        builder = self.translator.function_builder
        functions = [
            builder.build_named(declaration)
            for declaration in self.source_unit.declarations(DeclarationKind.FUNCTION)
        ]
        type_indices = {
            function.name: self.writer.insert_function_metadata(function)
            for function in functions
        }
        self.tracker.count_prototypes(len(type_indices))
        logger.info(f"Parsed {len(functions)} function definitions.")
        return type_indices

    def translate_global_types(self) -> dict[str, TypeNode]:
        """Translate the types of named, typed global variables.

        Globals without a name or type are skipped; a type that cannot be
        translated aborts the run.
        """
        global_types = {}
        for declaration in self.source_unit.declarations(DeclarationKind.VARIABLE):
            name, source_type = declaration.display_name, declaration.type
            if not name or source_type is None:
                continue
            global_types[name] = self.translator.translate(source_type)
        logger.info(f"Parsed {len(global_types)} global variable definitions.")
        return global_types

    def _find(
        self, specs: tuple[SymbolSpec, ...], report: ReconstructionReport
    ) -> list[ResolvedSymbol]:
        result = self.finder.find_symbols(specs)
        report.warnings.extend(result.warnings)
        self.tracker.count_symbols(len(result.symbols), len(result.warnings))
        return result.symbols

    @log_timing
    def run(self, configuration: SymbolConfiguration) -> ReconstructionReport:
        """Produce all debug-info records for one configuration.

        Args:
            configuration: Function and global symbol specs

        Returns:
            ReconstructionReport describing what was written

        Raises:
            SourceParseError: Front-end errors in the source
            StructuralError: A struct, function or global type failed to translate
        """
        report = ReconstructionReport()

        with self.tracker.track_operation("diagnostics"):
            self.check_diagnostics()

        with self.tracker.track_operation("structs"):
            report.structs = self.register_structs()

        with self.tracker.track_operation("function prototypes"):
            report.function_types = self.register_function_types()

        logger.info(
            f"Locating {len(configuration)} symbols "
            f"({len(configuration.functions)} functions, {len(configuration.globals)} globals)."
        )
        with self.tracker.track_operation("functions"):
            for symbol in self._find(configuration.functions, report):
                type_index = report.function_types.get(symbol.name)
                self.writer.insert_function(
                    symbol.section_index, symbol.offset, symbol.name, type_index
                )
                report.functions.append(replace(symbol, type_ref=type_index))

        with self.tracker.track_operation("globals"):
            global_types = self.translate_global_types()
            for symbol in self._find(configuration.globals, report):
                type_node = global_types.get(symbol.name)
                self.writer.insert_global(
                    symbol.name, symbol.section_index, symbol.offset, type_node
                )
                report.globals.append(replace(symbol, type_ref=type_node))

        for warning in report.warnings:
            logger.warning(str(warning))

        self.tracker.report_summary()
        return report


@log_timing
def reconstruct(config: Config) -> ReconstructionReport:
    """Run a full reconstruction from a validated Config and write the output.

    Raises:
        ReconstructionError: Any fatal configuration, upstream or structural error
    """
    assert config.binary_path is not None and config.source_path is not None

    configuration = load_symbol_configuration(config.symbol_config_path)
    image = BinaryImageLoader.load(config.binary_path)
    source_unit = ClangFrontend().parse(config.source_path, config.clang_args, image.is_64)
    writer = JsonDebugInfoWriter(image.is_64, image.image_base)

    report = DebugInfoReconstructor(image, source_unit, writer).run(configuration)

    writer.commit(config.binary_path, config.resolved_output_path())
    return report
