BASE_URL = "https://rest.api.transifex.test"
