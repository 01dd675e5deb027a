major = 1
minor = 0
micro = 0
