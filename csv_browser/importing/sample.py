"""
Built-in demo dataset, loaded by the "Load sample data" button.
"""

SAMPLE_IDENTITY = "sample_data.csv"

SAMPLE_CSV = """company_id,company_name,industry,employees,address
1,Sample Corporation,IT,100,"Shibuya, Tokyo"
2,Test Engineering,Manufacturing,50,"Osaka, Osaka"
3,Future Development,Real Estate,30,"Fukuoka, Fukuoka"
"""
