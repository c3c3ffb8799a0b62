from kubemanifest.cli import main

main()
