"""
Consultas GraphQL del servicio de catálogo.
"""

PRICE_FIELDS_FRAGMENT = """fragment priceFields on ProductViewPrice {
  roles
  regular {
      amount {
          currency
          value
      }
  }
  final {
      amount {
          currency
          value
      }
  }
}"""

PRODUCT_PRICE_QUERY = f"""query ProductQuery($sku: String!) {{
  products(skus: [$sku]) {{
    ... on SimpleProductView {{
      price {{
        ...priceFields
      }}
    }}
    ... on ComplexProductView {{
      priceRange {{
        maximum {{
          ...priceFields
        }}
        minimum {{
          ...priceFields
        }}
      }}
    }}
  }}
}}
{PRICE_FIELDS_FRAGMENT}"""
