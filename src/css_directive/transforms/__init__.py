from css_directive.transforms.base import SourceCodeTransform
from css_directive.transforms.css_directive import CSSDirectiveTransform
from css_directive.utilities.resolver import UtilityResolver

BUILTIN_TRANSFORMS = [
    CSSDirectiveTransform(),
]

_STAGES = ("pre", None, "post")


async def apply_transforms(code, id, resolver: UtilityResolver, custom_transforms=None):
    """Run the built-in transforms (and any custom ones) over *code*.

    Transforms run by stage (``pre``, unstaged, ``post``), in registration
    order within a stage, and only for ids their ``id_filter`` accepts.
    """
    transforms = list(BUILTIN_TRANSFORMS)
    if custom_transforms:
        transforms.extend(custom_transforms)
    for stage in _STAGES:
        for t in transforms:
            if t.enforce != stage or not t.id_filter(id):
                continue
            code = await t.transform(code, id, resolver)
    return code


__all__ = ["BUILTIN_TRANSFORMS", "CSSDirectiveTransform", "SourceCodeTransform", "apply_transforms"]
