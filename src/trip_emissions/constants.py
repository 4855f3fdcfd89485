from typing import Literal

# ============================================================================
# SETTINGS & CONSTANTS
# ============================================================================

# Emission factors (kg CO2 per km travelled)
EMISSIONFACTOR_BICYCLE = 0.0
EMISSIONFACTOR_CAR = 0.12
EMISSIONFACTOR_BUS = 0.089
EMISSIONFACTOR_BOAT = 0.96

DEFAULT_EMISSION_FACTORS = {
    "bicycle": EMISSIONFACTOR_BICYCLE,
    "car": EMISSIONFACTOR_CAR,
    "bus": EMISSIONFACTOR_BUS,
    "boat": EMISSIONFACTOR_BOAT,
}

# Display attributes: mode -> (label, icon, color)
DEFAULT_TRANSPORT_MODES = {
    "bicycle": ("Bicicleta", "🚲", "#10b981"),
    "car": ("Carro", "🚗", "#059669"),
    "bus": ("Ônibus", "🚌", "#3b82f6"),
    "boat": ("Barco", "⛵", "#ef4444"),
}

# Baseline mode for savings and comparison percentages
REFERENCE_MODE = "car"

# Carbon credits
KG_PER_CREDIT = 1000.0
PRICE_MIN_PER_CREDIT = 50.0
PRICE_MAX_PER_CREDIT = 150.0
CREDIT_CURRENCY = "BRL"

# Rounding
EMISSION_DECIMALS = 2
CREDIT_DECIMALS = 4
PRICE_DECIMALS = 2

# Known city pairs (origin, destination, km). Order matters: first match wins.
DEFAULT_ROUTES = [
    ("São Paulo, SP", "Rio de Janeiro, RJ", 430),
    ("São Paulo, SP", "Brasília, DF", 1015),
    ("Rio de Janeiro, RJ", "Brasília, DF", 1148),
    ("São Paulo, SP", "Campinas, SP", 95),
    ("Rio de Janeiro, RJ", "Niterói, RJ", 13),
    ("Belo Horizonte, MG", "Ouro Preto, MG", 100),
    ("São Paulo, SP", "Belo Horizonte, MG", 586),
    ("Salvador, BA", "Feira de Santana, BA", 109),
    ("Salvador, BA", "Brasília, DF", 1120),
    ("Fortaleza, CE", "Natal, RN", 534),
    ("Recife, PE", "João Pessoa, PB", 120),
    ("Recife, PE", "Salvador, BA", 800),
    ("Manaus, AM", "Porto Velho, RO", 880),
    ("Belém, PA", "São Luís, MA", 980),
    ("Curitiba, PR", "Florianópolis, SC", 300),
    ("Porto Alegre, RS", "Florianópolis, SC", 470),
    ("Curitiba, PR", "São Paulo, SP", 408),
    ("Vitória, ES", "Rio de Janeiro, RJ", 520),
    ("Goiânia, GO", "Brasília, DF", 205),
    ("Cuiabá, MT", "Campo Grande, MS", 690),
    ("Campo Grande, MS", "Goiânia, GO", 780),
    ("Manaus, AM", "Belém, PA", 1040),
    ("Teresina, PI", "Fortaleza, CE", 530),
    ("João Pessoa, PB", "Natal, RN", 190),
    ("Aracaju, SE", "Salvador, BA", 330),
    ("Maceió, AL", "Recife, PE", 250),
    ("São Paulo, SP", "Santos, SP", 72),
    ("Rio de Janeiro, RJ", "Petrópolis, RJ", 68),
    ("Belo Horizonte, MG", "Uberlândia, MG", 500),
    ("Ribeirão Preto, SP", "São Paulo, SP", 318),
    ("Campinas, SP", "São José dos Campos, SP", 100),
    ("Porto Velho, RO", "Rio Branco, AC", 507),
    ("Palmas, TO", "Goiânia, GO", 720),
    ("Salvador, BA", "Ilhéus, BA", 275),
    ("Curitiba, PR", "Porto Alegre, RS", 710),
]

# ============================================================================
# TYPES (Code constructs, not configuration parameters)
# ============================================================================

DistanceSource = Literal["route_table", "manual"]
