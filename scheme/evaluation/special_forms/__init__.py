"""Registry of special forms for the evaluator.

Maps Symbols to handler functions that implement non-standard evaluation rules.
The evaluator consults this table before ordinary procedure application.
"""

from scheme.types.symbol import DEFINE, IF, QUOTE
from scheme.evaluation.special_forms.quote_form import quote_form
from scheme.evaluation.special_forms.define_form import define_form
from scheme.evaluation.special_forms.if_form import if_form

SPECIAL_FORMS = {
    QUOTE: quote_form,
    DEFINE: define_form,
    IF: if_form,
}
