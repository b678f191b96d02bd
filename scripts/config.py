"""
Configuración del servicio de precios usando variables de entorno.
"""
import os
from dotenv import load_dotenv

# Cargar variables de entorno desde .env
load_dotenv()

# Variable de entorno -> header de la petición
HEADER_VARIABLES = {
    'PDP_ENVIRONMENT_ID': 'Magento-Environment-Id',
    'PDP_STORE_VIEW_CODE': 'Magento-Store-View-Code',
    'PDP_WEBSITE_CODE': 'Magento-Website-Code',
    'PDP_STORE_CODE': 'Magento-Store-Code',
    'PDP_CUSTOMER_GROUP': 'Magento-Customer-Group',
    'PDP_API_KEY': 'x-api-key',
}


def get_graphql_config():
    """
    Obtiene la configuración del servicio GraphQL desde variables de entorno.

    Returns:
        dict: endpoint, headers (solo los definidos) y timeout en segundos
    """
    headers = {}
    for variable, header in HEADER_VARIABLES.items():
        value = os.getenv(variable, '')
        if value:
            headers[header] = value

    return {
        'endpoint': os.getenv('PDP_GRAPHQL_ENDPOINT', ''),
        'headers': headers,
        'timeout': int(os.getenv('PDP_TIMEOUT', '30')),
    }
