from flowline.app import main

main()
