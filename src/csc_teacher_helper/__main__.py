from csc_teacher_helper.cli import main

main()
