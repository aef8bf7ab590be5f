"""Comments domain — comment id grammar, normalizer, cref resolver, comment model."""

from docloom.comments.comment_id import CommentId, Kind, classify, is_comment_id
from docloom.comments.context import RemoteDetail, SourceContext
from docloom.comments.dialects import (
    CSHARP,
    VISUAL_BASIC,
    LanguageDialect,
    get_dialect,
    supported_languages,
)
from docloom.comments.doc_file import MemberComment, iter_members, read_doc_file
from docloom.comments.markup import MarkupError, MarkupTree, inner_xml, parse_markup
from docloom.comments.model import (
    MALFORMED_COMMENT_MARKER,
    ParsedComment,
    ReferenceEntry,
    build_comment,
)
from docloom.comments.normalizer import normalize
from docloom.comments.resolver import (
    resolve_crefs,
    resolve_langwords,
    resolve_see_also_crefs,
    resolve_see_crefs,
)

__all__ = [
    "CSHARP",
    "MALFORMED_COMMENT_MARKER",
    "VISUAL_BASIC",
    "CommentId",
    "Kind",
    "LanguageDialect",
    "MarkupError",
    "MarkupTree",
    "MemberComment",
    "ParsedComment",
    "ReferenceEntry",
    "RemoteDetail",
    "SourceContext",
    "build_comment",
    "classify",
    "get_dialect",
    "inner_xml",
    "is_comment_id",
    "iter_members",
    "normalize",
    "parse_markup",
    "read_doc_file",
    "resolve_crefs",
    "resolve_langwords",
    "resolve_see_also_crefs",
    "resolve_see_crefs",
    "supported_languages",
]
