"""Built-in language syntax table."""

from hermes.languages.models import LanguageSyntax

_C_BLOCK = (("/*", "*/"),)

RUST = LanguageSyntax(
    name="Rust",
    line_comments=("//",),
    nested_comments=_C_BLOCK,
    doc_marker="///",
    extensions=("rs",),
)

C = LanguageSyntax(
    name="C",
    line_comments=("//",),
    multi_line_comments=_C_BLOCK,
    extensions=("c", "h"),
)

CPP = LanguageSyntax(
    name="C++",
    line_comments=("//",),
    multi_line_comments=_C_BLOCK,
    extensions=("cc", "cpp", "cxx", "c++", "hh", "hpp", "hxx", "inl"),
)

CSHARP = LanguageSyntax(
    name="C#",
    line_comments=("//",),
    multi_line_comments=_C_BLOCK,
    extensions=("cs", "csx"),
)

JAVA = LanguageSyntax(
    name="Java",
    line_comments=("//",),
    multi_line_comments=_C_BLOCK,
    extensions=("java",),
)

KOTLIN = LanguageSyntax(
    name="Kotlin",
    line_comments=("//",),
    nested_comments=_C_BLOCK,
    extensions=("kt", "kts"),
)

SCALA = LanguageSyntax(
    name="Scala",
    line_comments=("//",),
    nested_comments=_C_BLOCK,
    extensions=("scala", "sc"),
)

SWIFT = LanguageSyntax(
    name="Swift",
    line_comments=("//",),
    nested_comments=_C_BLOCK,
    extensions=("swift",),
)

GO = LanguageSyntax(
    name="Go",
    line_comments=("//",),
    multi_line_comments=_C_BLOCK,
    extensions=("go",),
)

JAVASCRIPT = LanguageSyntax(
    name="JavaScript",
    line_comments=("//",),
    multi_line_comments=_C_BLOCK,
    extensions=("js", "mjs", "cjs", "jsx"),
)

TYPESCRIPT = LanguageSyntax(
    name="TypeScript",
    line_comments=("//",),
    multi_line_comments=_C_BLOCK,
    extensions=("ts", "mts", "cts", "tsx"),
)

DART = LanguageSyntax(
    name="Dart",
    line_comments=("//",),
    nested_comments=_C_BLOCK,
    extensions=("dart",),
)

CSS = LanguageSyntax(
    name="CSS",
    multi_line_comments=_C_BLOCK,
    extensions=("css",),
)

SCSS = LanguageSyntax(
    name="Sass",
    line_comments=("//",),
    multi_line_comments=_C_BLOCK,
    extensions=("scss", "sass"),
)

PHP = LanguageSyntax(
    name="PHP",
    line_comments=("//", "#"),
    multi_line_comments=_C_BLOCK,
    extensions=("php",),
)

SQL = LanguageSyntax(
    name="SQL",
    line_comments=("--",),
    multi_line_comments=_C_BLOCK,
    extensions=("sql",),
)

PYTHON = LanguageSyntax(
    name="Python",
    line_comments=("#",),
    multi_line_comments=(('"""', '"""'), ("'''", "'''")),
    extensions=("py", "pyw", "pyi"),
)

RUBY = LanguageSyntax(
    name="Ruby",
    line_comments=("#",),
    multi_line_comments=(("=begin", "=end"),),
    extensions=("rb",),
    filenames=("Rakefile", "Gemfile"),
)

PERL = LanguageSyntax(
    name="Perl",
    line_comments=("#",),
    multi_line_comments=(("=pod", "=cut"),),
    extensions=("pl", "pm"),
)

SHELL = LanguageSyntax(
    name="Shell",
    line_comments=("#",),
    extensions=("sh", "bash", "zsh"),
)

HASKELL = LanguageSyntax(
    name="Haskell",
    line_comments=("--",),
    nested_comments=(("{-", "-}"),),
    extensions=("hs",),
)

LUA = LanguageSyntax(
    name="Lua",
    line_comments=("--",),
    multi_line_comments=(("--[[", "]]"),),
    extensions=("lua",),
)

ERLANG = LanguageSyntax(
    name="Erlang",
    line_comments=("%",),
    extensions=("erl", "hrl"),
)

ELIXIR = LanguageSyntax(
    name="Elixir",
    line_comments=("#",),
    extensions=("ex", "exs"),
)

R = LanguageSyntax(
    name="R",
    line_comments=("#",),
    extensions=("r",),
)

HTML = LanguageSyntax(
    name="HTML",
    multi_line_comments=(("<!--", "-->"),),
    extensions=("html", "htm"),
)

XML = LanguageSyntax(
    name="XML",
    multi_line_comments=(("<!--", "-->"),),
    extensions=("xml", "xsd", "xsl", "svg"),
)

YAML = LanguageSyntax(
    name="YAML",
    line_comments=("#",),
    extensions=("yaml", "yml"),
)

TOML = LanguageSyntax(
    name="TOML",
    line_comments=("#",),
    extensions=("toml",),
)

MAKEFILE = LanguageSyntax(
    name="Makefile",
    line_comments=("#",),
    extensions=("mk", "makefile"),
    filenames=("Makefile", "makefile", "GNUmakefile"),
)

DOCKERFILE = LanguageSyntax(
    name="Dockerfile",
    line_comments=("#",),
    extensions=("dockerfile",),
    filenames=("Dockerfile",),
)

# No comment grammar: every changed line counts as code.
MARKDOWN = LanguageSyntax(
    name="Markdown",
    extensions=("md", "markdown"),
)

TEXT = LanguageSyntax(
    name="Text",
    extensions=("txt", "text"),
)

ALL_BUILTIN_LANGUAGES: list[LanguageSyntax] = [
    RUST,
    C,
    CPP,
    CSHARP,
    JAVA,
    KOTLIN,
    SCALA,
    SWIFT,
    GO,
    JAVASCRIPT,
    TYPESCRIPT,
    DART,
    CSS,
    SCSS,
    PHP,
    SQL,
    PYTHON,
    RUBY,
    PERL,
    SHELL,
    HASKELL,
    LUA,
    ERLANG,
    ELIXIR,
    R,
    HTML,
    XML,
    YAML,
    TOML,
    MAKEFILE,
    DOCKERFILE,
    MARKDOWN,
    TEXT,
]

__all__ = ["ALL_BUILTIN_LANGUAGES"]
