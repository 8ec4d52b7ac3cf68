"""TextMate token color rules derived from the semantic code roles.

Rule order matters: editors break ties between equally specific scope
selectors in favour of the rule declared last, so ``TOKEN_COLOR_RULES`` is
emitted exactly as listed.
"""

from __future__ import annotations

import logging
from collections import namedtuple
from dataclasses import dataclass, fields
from typing import Optional, Tuple, Union

logger = logging.getLogger(__name__)

# Canonical order of the font style flags in a "fontStyle" value
FONT_STYLES = ("italic", "bold", "underline", "strikethrough")

# `foreground` names a SemanticCodeTheme field, or "error" for the interface
# error color. `font_style` None inherits, "" resets.
RuleTemplate = namedtuple("RuleTemplate", ["name", "scope", "foreground", "font_style"])

TOKEN_COLOR_RULES = (
    # Fallback for unused/unknown scopes
    RuleTemplate("Text", "comment.unused.elixir", "foreground", None),
    RuleTemplate(
        "Comments",
        (
            "comment",
            "punctuation.definition.comment",
            "comment.block.documentation punctuation.definition",
            "string.comment",
            "comment.block.documentation",
            "comment.block",
        ),
        "comment",
        "italic",
    ),
    RuleTemplate(
        "Doc Comment Keywords",
        (
            "comment.block.documentation variable",
            "keyword.other.documentation",
            "storage.type.class.jsdoc",
            "comment.block variable.parameter",
            "keyword.other.phpdoc",
            "comment.block.documentation entity.name.type",
            "meta.other.type.phpdoc support class",
        ),
        "comment",
        None,
    ),
    RuleTemplate(
        "Punctuation",
        (
            "punctuation.comma.graphql",
            "punctuation.definition.variable",
            "punctuation.definition.parameters",
            "punctuation.definition.array",
            "punctuation.definition.function",
            "punctuation.brace",
            "punctuation.terminator.statement",
            "punctuation.delimiter.object.comma",
            "punctuation.definition.entity",
            "punctuation.definition",
            "punctuation.definition.string.begin.markdown",
            "punctuation.definition.string.end.markdown",
            "punctuation.separator.key-value",
            "punctuation.separator.dictionary",
            "punctuation.terminator",
            "punctuation.delimiter.comma",
            "punctuation.separator.comma",
            "punctuation.accessor",
            "punctuation.separator.array",
            "punctuation.section",
            "punctuation.section.property-list.begin.bracket.curly",
            "punctuation.section.property-list.end.bracket.curly",
            "punctuation.separator.statement",
            "punctuation.section.array.elixir",
            "punctuation.separator.object.elixir",
            "punctuation.section.embedded.elixir",
            "punctuation.section.function.elixir",
            "punctuation.section.scope.elixir",
            "punctuation.separator.parameter",
            "meta.brace.round",
            "meta.brace.square",
            "meta.brace.curly",
            "constant.name.attribute.tag.pug",
            "punctuation.section.embedded",
            "punctuation.separator.method",
            "punctuation.separator",
            "punctuation.other.comma",
            "punctuation.bracket",
            "keyword.control.ternary",
            "string.interpolated.pug",
            "support.function.interpolation.sass",
            "punctuation.parenthesis.begin",
            "punctuation.parenthesis.end",
            "punctuation.operation.graphql",
            "punctuation.colon.graphql",
        ),
        "punctuation",
        None,
    ),
    RuleTemplate("Delimiters", "none", "foreground", None),
    RuleTemplate("Operators", "keyword.operator", "punctuation", None),
    RuleTemplate(
        "Keywords",
        (
            "keyword",
            "keyword.operator.expression",
            "keyword.operator.type.asserts",
            "variable.language",
            "keyword.other.special-method.elixir",
            "meta.control.flow",
        ),
        "keyword",
        None,
    ),
    RuleTemplate(
        "Variables",
        (
            "variable",
            "source.elixir.embedded.source",
            "string source.groovy",
            "string meta.embedded.line.ruby",
        ),
        "foreground",
        None,
    ),
    RuleTemplate(
        "Functions",
        (
            "entity.name.function",
            "meta.require",
            "support.function.any-method",
            "meta.function-call",
            "meta.method-call",
            "variable.function",
        ),
        "function",
        None,
    ),
    RuleTemplate(
        "Classes",
        (
            "support.class",
            "entity.name.class",
            "entity.name.type.class",
            "meta.class.instance",
            "meta.class.inheritance",
            "entity.other.inherited-class",
            "entity.name.type",
            "variable.other.constant.elixir",
            "storage.type.haskell",
            "support.type.graphql",
            "support.type.enum.graphql",
        ),
        "type",
        None,
    ),
    RuleTemplate("Methods", "keyword.other.special-method", "function", None),
    RuleTemplate(
        "Storage",
        (
            "storage",
            "constant.language",
        ),
        "keyword",
        None,
    ),
    RuleTemplate("Support", "support.function", "function", None),
    RuleTemplate(
        "Strings, Inherited Class",
        (
            "string",
            "punctuation.definition.string",
            "support.constant.property-value",
            "string.quoted.double.shell",
            "support.function.variable.quoted.single.elixir",
            "storage.type.string",
        ),
        "string",
        None,
    ),
    RuleTemplate(
        "Integers",
        (
            "constant.numeric",
            "variable.other.anonymous.elixir",
        ),
        "number",
        None,
    ),
    RuleTemplate("Floats", "none", "number", None),
    RuleTemplate("Boolean", "none", "keyword", None),
    RuleTemplate(
        "Constants",
        (
            "constant",
            "variable.other.constant",
            "punctuation.definition.constant",
            "constant.other.symbol",
            "constant.language.symbol",
            "support.constant",
            "support.variable.magic.python",
            "variable.other.enummember",
        ),
        "foreground",
        None,
    ),
    RuleTemplate(
        "Tags",
        (
            "punctuation.definition.tag",
        ),
        "function",
        None,
    ),
    RuleTemplate("Tag name", "entity.name.tag", "tag", None),
    RuleTemplate(
        "Attribute IDs",
        (
            "entity.other.attribute-name",
            "string.unquoted.alias.graphql",
        ),
        "attribute",
        None,
    ),
    RuleTemplate("Selector", "meta.selector", "punctuation", None),
    RuleTemplate("Values", "none", "number", None),
    # Markup
    RuleTemplate(
        "Headings",
        (
            "markup.heading",
            "punctuation.definition.heading",
            "entity.name.section",
            "markup.heading.setext",
        ),
        "string",
        "",
    ),
    RuleTemplate("Units", "keyword.other.unit", "string", None),
    RuleTemplate(
        "Bold",
        (
            "markup.bold",
            "punctuation.definition.bold",
        ),
        "type",
        "bold",
    ),
    RuleTemplate(
        "Italic",
        (
            "markup.italic",
            "punctuation.definition.italic",
        ),
        "attribute",
        "italic",
    ),
    RuleTemplate(
        "Strikethrough",
        (
            "markup.strikethrough",
            "punctuation.definition.strikethrough",
        ),
        "comment",
        "strikethrough",
    ),
    RuleTemplate(
        "Strikethrough Italic",
        (
            "markup.strikethrough markup.italic",
            "markup.strikethrough markup.italic punctuation.definition.italic",
        ),
        "comment",
        "italic strikethrough",
    ),
    RuleTemplate(
        "Strikethrough Bold",
        (
            "markup.strikethrough markup.bold",
            "markup.strikethrough markup.bold punctuation.definition.bold",
        ),
        "comment",
        "bold strikethrough",
    ),
    RuleTemplate("Code", "markup.raw.inline", "string", None),
    RuleTemplate("Link Text", "string.other.link", "function", None),
    RuleTemplate("Link Url", "meta.link", "attribute", None),
    RuleTemplate("Lists", "beginning.punctuation.definition.list", "property", None),
    RuleTemplate("Quotes", "markup.quote", "foreground", None),
    RuleTemplate("Separator", "meta.separator", "foreground", None),
    RuleTemplate("Inserted", "markup.inserted", "function", None),
    RuleTemplate("Deleted", "markup.deleted", "type", None),
    RuleTemplate("Changed", "markup.changed", "keyword", None),
    RuleTemplate("Regular Expressions", "string.regexp", "string", None),
    RuleTemplate(
        "Escape Characters",
        (
            "constant.character.escape",
            "constant.other.character-class",
        ),
        "attribute",
        None,
    ),
    RuleTemplate("Embedded", "variable.interpolation", "attribute", None),
    RuleTemplate("Illegal", "invalid", "error", None),
    RuleTemplate("New Operator", "keyword.operator.new", "keyword", None),
    RuleTemplate("Css ID", "entity.other.attribute-name.id", "type", None),
    RuleTemplate("Function Parameters", "meta.function-call.arguments", "foreground", None),
    RuleTemplate(
        "Object Properties",
        (
            "meta.object-literal.key",
            "meta.object.member",
            "variable.other.property",
            "variable.other.object.property",
            "support.variable.property",
            "variable.object.property",
            "support.type.property-name",
            "meta.property-name",
            "entity.name.tag.yaml",
            "constant.other.key",
            "constant.other.object.key.js",
            "string.unquoted.label.js",
            "support.type.map.key",
            "variable.graphql",
        ),
        "property",
        None,
    ),
    RuleTemplate(
        "Markup Code",
        (
            "markup.inline.raw",
            "markup.fenced_code.block",
            "markup.raw.block",
        ),
        "property",
        None,
    ),
    RuleTemplate("Markup Link Image", "markup.underline.link.image", "function", None),
    RuleTemplate(
        "Variable Parameter",
        (
            "variable.parameter",
            "parameter.variable.function.elixir",
            "variable.other.block.ruby",
        ),
        "parameter",
        None,
    ),
    RuleTemplate(
        "Type Primitive",
        (
            "support.type.primitive",
            "support.type.builtin",
        ),
        "primitive",
        None,
    ),
    # Shell
    RuleTemplate("BASH: Command Substitution", "string.interpolated.dollar.shell", "type", None),
    RuleTemplate("BASH: Math Operation", "string.other.math.shell", "function", None),
    RuleTemplate(
        "BASH: Substitution",
        (
            "punctuation.definition.string.begin.shell",
            "punctuation.definition.string.end.shell",
        ),
        "punctuation",
        None,
    ),
    # Rainbow CSV
    RuleTemplate("CSV Rainbow 4", "comment.rainbow4", "property", None),
    RuleTemplate("CSV Rainbow 9", "markup.bold.rainbow9", "foreground", ""),
    RuleTemplate("CSV Rainbow 10", "invalid.rainbow10", "attribute", None),
    # Must follow Keywords and Storage
    RuleTemplate(
        "Imports and Exports",
        (
            "keyword.control.import",
            "keyword.control.export",
            "keyword.control.from",
        ),
        "import_",
        None,
    ),
    RuleTemplate(
        "Async",
        (
            "storage.modifier.async",
            "keyword.control.as",
            "keyword.control.type",
        ),
        "modifier",
        None,
    ),
    RuleTemplate("Storage - const, let, function, type, etc", "storage", "storage", None),
    RuleTemplate("keyword - await, return, etc", "keyword.control.flow", "control_flow", "bold"),
)


def normalize_font_style(font_style):
    """Order font style flags canonically, e.g. "strikethrough italic" -> "italic strikethrough".

    None stays None (inherit) and "" stays "" (explicitly no style).
    """
    if font_style is None:
        return None
    flags = font_style.split()
    unknown = [flag for flag in flags if flag not in FONT_STYLES]
    if unknown:
        raise ValueError(f"Unknown font style {', '.join(unknown)!r}, expected {FONT_STYLES}")
    return " ".join(flag for flag in FONT_STYLES if flag in flags)


@dataclass(frozen=True)
class TokenSettings:
    foreground: Optional[str] = None
    background: Optional[str] = None
    font_style: Optional[str] = None

    def resolve(self, palette):
        settings = {}
        if self.foreground:
            settings["foreground"] = palette.resolve(self.foreground)
        if self.background:
            settings["background"] = palette.resolve(self.background)
        if self.font_style is not None:
            settings["fontStyle"] = self.font_style
        return settings


@dataclass(frozen=True)
class TokenColorRule:
    """One "tokenColors" entry, with colors still as palette references."""

    scope: Union[str, Tuple[str, ...]]
    settings: TokenSettings
    name: Optional[str] = None

    def resolve(self, palette):
        """Return the JSON form of the rule with colors resolved to hex."""
        rule = {}
        if self.name:
            rule["name"] = self.name
        rule["scope"] = self.scope if isinstance(self.scope, str) else list(self.scope)
        rule["settings"] = self.settings.resolve(palette)
        return rule


def build_token_colors(code, error):
    """Map the semantic code theme to the ordered TextMate rule list.

    Args:
        code: SemanticCodeTheme with palette references
        error: Interface error color reference, used for invalid code

    Returns:
        list[TokenColorRule]: Rules in declaration order
    """
    roles = {f.name: getattr(code, f.name) for f in fields(code)}
    roles["error"] = error

    rules = [
        TokenColorRule(
            name=template.name,
            scope=template.scope,
            settings=TokenSettings(
                foreground=roles[template.foreground],
                font_style=normalize_font_style(template.font_style),
            ),
        )
        for template in TOKEN_COLOR_RULES
    ]
    logger.debug("Generated %d token color rules", len(rules))
    return rules
