"""
Company Use Cases

Viewing and editing the caller's company.
"""

from .dtos import CompanyResponse, UpdateCompanyCommand
from .get_company_use_case import GetCompanyUseCase
from .update_company_use_case import UpdateCompanyUseCase

__all__ = [
    "GetCompanyUseCase",
    "UpdateCompanyUseCase",
    "UpdateCompanyCommand",
    "CompanyResponse",
]
