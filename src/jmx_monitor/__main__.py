from jmx_monitor import main

main()
