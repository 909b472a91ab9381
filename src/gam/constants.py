APP_NAME = "gam"
