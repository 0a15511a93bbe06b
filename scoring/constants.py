SIMULATED_MODEL_VERSION = "1.0.0-simulated"

# tCO2e sequestered per hectare per year
SEQUESTRATION_RATES = {
    'mangrove':        '7.0',
    'saltmarsh':       '5.0',
    'seagrass':        '4.4',
    'coastal_wetland': '4.0',
}
DEFAULT_SEQUESTRATION_RATE = '4.0'

SIMULATED_HEALTH_RANGE = (0.55, 0.95)

APPROVE_MIN_HEALTH = 0.75
REVIEW_MIN_HEALTH = 0.5

RECOMMENDATIONS = ['APPROVE', 'REVIEW', 'REJECT']

LARGE_AREA_HECTARES = 10_000

# largest value the carbon_estimate columns hold (max_digits=14, decimal_places=3)
MAX_CARBON_ESTIMATE = '99999999999.999'
