from enum import Enum
from typing import Optional
from pydantic import BaseModel, field_validator


class OutputFormat(str, Enum):
    json = 'json'
    yaml = 'yaml'


class ConfigFile(BaseModel):
    kubeconfig_file_path: Optional[str] = None  # Path to kubeconfig
    tenant: Optional[str] = None  # Unset means all tenants
    namespace: str = 'default'  # Namespace used when none is given on the command line
    output_format: OutputFormat = OutputFormat.yaml

    @field_validator('tenant', mode='after')
    @classmethod
    def tenant_not_empty(cls, value: Optional[str]) -> Optional[str]:
        if value == '':
            raise ValueError('tenant must be omitted to address all tenants')
        return value
