from .api_client import ApiError, CatalogApiClient
from .controller import FormController, FormResult, Outcome, Navigator, Notifier
from .definitions import (
    EntityForm,
    FORMS,
    BILLBOARD_FORM,
    CATEGORY_FORM,
    SUBCATEGORY_FORM,
    SIZE_FORM,
    COLOR_FORM,
    PRODUCT_FORM,
)
from .state import FormState, FormPhase

__all__ = [
    'ApiError', 'CatalogApiClient',
    'FormController', 'FormResult', 'Outcome', 'Navigator', 'Notifier',
    'EntityForm', 'FORMS',
    'BILLBOARD_FORM', 'CATEGORY_FORM', 'SUBCATEGORY_FORM', 'SIZE_FORM', 'COLOR_FORM', 'PRODUCT_FORM',
    'FormState', 'FormPhase',
]
