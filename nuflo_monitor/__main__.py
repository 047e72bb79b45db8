from nuflo_monitor.main import main

main()
