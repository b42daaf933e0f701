"""Static BFF vocabulary.

Function names, directives, keywords, built-in variables and the properties each
function reads. Used by completion.
"""

from types import MappingProxyType

FUNCTIONS: tuple[str, ...] = (
    "Alias",
    "CSAssembly",
    "Compiler",
    "Copy",
    "CopyDir",
    "DLL",
    "Error",
    "Exec",
    "Executable",
    "ForEach",
    "If",
    "Library",
    "ListDependencies",
    "ObjectList",
    "Print",
    "RemoveDir",
    "Settings",
    "Test",
    "TextFile",
    "Unity",
    "Using",
    "VCXProject",
    "VSProjectExternal",
    "VSSolution",
    "XCodeProject",
)
"""Built-in functions."""

DIRECTIVES: tuple[str, ...] = (
    "define",
    "else",
    "endif",
    "if",
    "import",
    "include",
    "once",
    "undef",
)
"""Preprocessor directives, without the leading `#`."""

KEYWORDS: tuple[str, ...] = (
    "exists",
    "false",
    "file_exists",
    "in",
    "not",
    "true",
)
"""Literal and operator keywords."""

BUILTIN_VARIABLES: tuple[str, ...] = (
    "_CURRENT_BFF_DIR_",
    "_FASTBUILD_EXE_PATH_",
    "_FASTBUILD_VERSION_",
    "_FASTBUILD_VERSION_STRING_",
    "_WORKING_DIR_",
)
"""Variables FASTBuild defines before the root file is parsed."""

_DEPENDENCIES = ("PreBuildDependencies",)

_COMPILER_INPUTS = (
    "CompilerInputAllowNoFiles",
    "CompilerInputExcludePath",
    "CompilerInputExcludePattern",
    "CompilerInputExcludedFiles",
    "CompilerInputFiles",
    "CompilerInputFilesRoot",
    "CompilerInputObjectLists",
    "CompilerInputPath",
    "CompilerInputPathRecurse",
    "CompilerInputPattern",
    "CompilerInputUnity",
)

_OBJECT_LIST = (
    "AllowCaching",
    "AllowDistribution",
    "Compiler",
    "CompilerForceUsing",
    "CompilerOptions",
    "CompilerOutputExtension",
    "CompilerOutputKeepBaseExtension",
    "CompilerOutputPath",
    "CompilerOutputPrefix",
    *_COMPILER_INPUTS,
    "DeoptimizeWritableFiles",
    "DeoptimizeWritableFilesWithToken",
    "PCHInputFile",
    "PCHOptions",
    "PCHOutputFile",
    "Preprocessor",
    "PreprocessorOptions",
    *_DEPENDENCIES,
)

_LINKER = (
    "Environment",
    "Libraries",
    "Libraries2",
    "Linker",
    "LinkerAllowResponseFile",
    "LinkerAssemblyResources",
    "LinkerForceResponseFile",
    "LinkerLinkObjects",
    "LinkerOptions",
    "LinkerOutput",
    "LinkerStampExe",
    "LinkerStampExeArgs",
    "LinkerType",
    *_DEPENDENCIES,
)

_PROJECT_COMMON = (
    "ProjectBasePath",
    "ProjectConfigs",
    "ProjectFiles",
    "ProjectFilesToExclude",
    "ProjectInputPaths",
    "ProjectInputPathsExclude",
    "ProjectOutput",
    "ProjectPatternToExclude",
)

FUNCTION_PROPERTIES: MappingProxyType[str, tuple[str, ...]] = MappingProxyType(
    {
        "Alias": ("Hidden", "Targets"),
        "CSAssembly": (
            "Compiler",
            "CompilerInputExcludePath",
            "CompilerInputExcludedFiles",
            "CompilerInputFiles",
            "CompilerInputPath",
            "CompilerInputPathRecurse",
            "CompilerInputPattern",
            "CompilerOptions",
            "CompilerOutput",
            "CompilerReferences",
            *_DEPENDENCIES,
        ),
        "Compiler": (
            "AllowDistribution",
            "AllowResponseFile",
            "ClangRewriteIncludes",
            "CompilerFamily",
            "CustomEnvironmentVariables",
            "Environment",
            "Executable",
            "ExecutableRootPath",
            "ExtraFiles",
            "ForceResponseFile",
            "SimpleDistributionMode",
            "UseLightCache_Experimental",
            "UseRelativePaths_Experimental",
            "VS2012EnumBugFix",
        ),
        "Copy": ("Dest", "Source", *_DEPENDENCIES),
        "CopyDir": (
            "Dest",
            "SourceExcludePaths",
            "SourcePaths",
            "SourcePathsPattern",
            "SourcePathsRecurse",
            *_DEPENDENCIES,
        ),
        "DLL": _LINKER,
        "Exec": (
            "Environment",
            "ExecAlways",
            "ExecAlwaysShowOutput",
            "ExecArguments",
            "ExecExecutable",
            "ExecInput",
            "ExecInputExcludePath",
            "ExecInputExcludedFiles",
            "ExecInputPath",
            "ExecInputPathRecurse",
            "ExecInputPattern",
            "ExecOutput",
            "ExecReturnCode",
            "ExecUseStdOutAsOutput",
            "ExecWorkingDir",
            *_DEPENDENCIES,
        ),
        "Executable": _LINKER,
        "Library": (
            *_OBJECT_LIST,
            "Librarian",
            "LibrarianAdditionalInputs",
            "LibrarianAllowResponseFile",
            "LibrarianForceResponseFile",
            "LibrarianOptions",
            "LibrarianOutput",
            "LibrarianType",
        ),
        "ListDependencies": ("Dest", "Patterns", "Source", *_DEPENDENCIES),
        "ObjectList": _OBJECT_LIST,
        "RemoveDir": (
            "RemoveExcludeFiles",
            "RemoveExcludePaths",
            "RemovePaths",
            "RemovePathsRecurse",
            "RemovePatterns",
            *_DEPENDENCIES,
        ),
        "Settings": (
            "CachePath",
            "CachePathMountPoint",
            "CachePluginDLL",
            "CachePluginDLLConfig",
            "ConcurrencyGroups",
            "DistributableJobMemoryLimitMiB",
            "Environment",
            "WorkerConnectionLimit",
            "Workers",
        ),
        "Test": (
            "Environment",
            "TestAlwaysShowOutput",
            "TestArguments",
            "TestExecutable",
            "TestInput",
            "TestInputExcludePath",
            "TestInputExcludedFiles",
            "TestInputPath",
            "TestInputPathRecurse",
            "TestInputPattern",
            "TestOutput",
            "TestTimeOut",
            "TestWorkingDir",
            *_DEPENDENCIES,
        ),
        "TextFile": (
            "Hidden",
            "TextFileAlways",
            "TextFileInputStrings",
            "TextFileOutput",
            *_DEPENDENCIES,
        ),
        "Unity": (
            "UnityInputExcludePath",
            "UnityInputExcludePattern",
            "UnityInputExcludedFiles",
            "UnityInputFiles",
            "UnityInputIsolateListFile",
            "UnityInputIsolateWritableFiles",
            "UnityInputIsolateWritableFilesLimit",
            "UnityInputObjectLists",
            "UnityInputPath",
            "UnityInputPathRecurse",
            "UnityInputPattern",
            "UnityNumFiles",
            "UnityOutputPath",
            "UnityOutputPattern",
            "UnityPCH",
            *_DEPENDENCIES,
        ),
        "VCXProject": (
            *_PROJECT_COMMON,
            "AdditionalOptions",
            "ApplicationEnvironment",
            "DefaultLanguage",
            "ForcedIncludes",
            "IncludeSearchPath",
            "IntermediateDirectory",
            "LocalDebuggerCommand",
            "LocalDebuggerCommandArguments",
            "LocalDebuggerEnvironment",
            "LocalDebuggerWorkingDirectory",
            "Output",
            "OutputDirectory",
            "PlatformToolset",
            "PreprocessorDefinitions",
            "ProjectAllowedFileExtensions",
            "ProjectBuildCommand",
            "ProjectCleanCommand",
            "ProjectFileTypes",
            "ProjectGuid",
            "ProjectInputPathsRecurse",
            "ProjectRebuildCommand",
            "ProjectReferences",
            "ProjectSccEntrySAK",
            *_DEPENDENCIES,
        ),
        "VSProjectExternal": (
            "ExternalProjectPath",
            "ProjectConfigs",
            "ProjectGuid",
            "ProjectTypeGuid",
        ),
        "VSSolution": (
            "SolutionBuildProject",
            "SolutionConfigs",
            "SolutionDependencies",
            "SolutionDeployProjects",
            "SolutionFolders",
            "SolutionMinimumVisualStudioVersion",
            "SolutionOutput",
            "SolutionProjects",
            "SolutionVisualStudioVersion",
        ),
        "XCodeProject": (
            *_PROJECT_COMMON,
            "XCodeBuildToolArgs",
            "XCodeBuildToolPath",
            "XCodeBuildWorkingDir",
            "XCodeCommandLineArguments",
            "XCodeCommandLineArgumentsDisabled",
            "XCodeDocumentVersioning",
            "XCodeOrganizationName",
            *_DEPENDENCIES,
        ),
    },
)
"""Properties each function reads from its body.

Functions whose body is free-form (`ForEach`, `If`, `Using`, ...) are absent.
"""

ALL_PROPERTIES: tuple[str, ...] = tuple(
    sorted({name for names in FUNCTION_PROPERTIES.values() for name in names}),
)
"""Every property any function reads, sorted."""


def properties_for(function: str | None) -> tuple[str, ...]:
    """Get the properties `function` reads, or every property if unknown."""
    if function is None:
        return ALL_PROPERTIES
    return FUNCTION_PROPERTIES.get(function, ALL_PROPERTIES)
