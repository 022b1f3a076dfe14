from rupaul.program import program

program.run()
