from taskhub.main import main

main()
