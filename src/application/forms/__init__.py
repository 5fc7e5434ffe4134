"""Form data handlers: translate submitted forms into commands."""

from .base import FormDataHandler
from .employee_form_data_handler import EmployeeFormDataHandler

__all__ = ["FormDataHandler", "EmployeeFormDataHandler"]
