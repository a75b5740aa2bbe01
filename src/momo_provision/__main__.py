from momo_provision.main import main

main()
