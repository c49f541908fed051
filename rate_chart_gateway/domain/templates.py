"""Template assembly - bundle a slab with the option lists for its form"""

from typing import Optional

from rate_chart_gateway.domain.models import RateSlab, SlabTemplate, TemplateOptions


def assemble_template(slab: Optional[RateSlab], options: TemplateOptions) -> SlabTemplate:
    """Combine an existing slab (edit/view) or None (create) with the form options"""
    return SlabTemplate(slab=slab, options=options)
